import pytest

from fuzzytime.phrase import format_fuzzy_time, hour_word, is_exact, minute_template


@pytest.mark.parametrize(
    "hour, minute, expected",
    [
        (0, 0, "midnight"),
        (12, 0, "noon"),
        (3, 0, "three o'clock"),
        (3, 15, "quarter past three"),
        (3, 45, "quarter to four"),
        (0, 5, "five past midnight"),
        (12, 5, "five past noon"),
        (23, 58, "eleven o'clock"),
        (11, 50, "ten to noon"),
        (23, 45, "quarter to midnight"),
        (0, 59, "midnight"),
        (12, 2, "noon"),
        (7, 30, "half past seven"),
        (19, 25, "twentyfive past seven"),
        (8, 35, "twentyfive to nine"),
        (15, 40, "twenty to four"),
        (6, 20, "twenty past six"),
        (10, 10, "ten past ten"),
        (1, 55, "five to two"),
    ],
)
def test_format_fuzzy_time(hour, minute, expected):
    assert format_fuzzy_time(hour, minute) == expected


def test_total_and_deterministic():
    for hour in range(24):
        for minute in range(60):
            phrase = format_fuzzy_time(hour, minute)
            assert phrase
            assert phrase == phrase.strip()
            assert format_fuzzy_time(hour, minute) == phrase


def test_hour_words():
    assert hour_word(0) == "midnight"
    assert hour_word(12) == "noon"
    assert hour_word(1) == "one"
    assert hour_word(11) == "eleven"
    for h in range(1, 12):
        assert hour_word(h) == hour_word(h + 12)


def test_afternoon_reads_like_morning():
    for h in range(1, 11):
        for minute in range(60):
            assert format_fuzzy_time(h, minute) == format_fuzzy_time(h + 12, minute)


def test_bucket_boundaries():
    assert minute_template(2) == "{hour} o'clock"
    assert minute_template(3) == "five past {hour}"
    assert minute_template(52) == "ten to {hour}"
    assert minute_template(53) == "ten to {hour}"
    assert minute_template(54) == "five to {hour}"
    assert minute_template(57) == "five to {hour}"
    assert minute_template(58) == "{hour} o'clock"


def test_bucket_widths():
    counts = {}
    for minute in range(60):
        template = minute_template(minute)
        counts[template] = counts.get(template, 0) + 1

    assert len(counts) == 12
    assert counts["ten to {hour}"] == 6
    assert counts["five to {hour}"] == 4
    others = [n for t, n in counts.items() if t not in ("ten to {hour}", "five to {hour}")]
    assert others == [5] * 10


def test_exact_bucket():
    assert [m for m in range(60) if is_exact(m)] == [0, 1, 2, 58, 59]


@pytest.mark.parametrize(
    "hour, minute, message",
    [
        (24, 0, "hour must be 0..23"),
        (-1, 0, "hour must be 0..23"),
        (3, 60, "minute must be 0..59"),
        (3, -1, "minute must be 0..59"),
        (True, 0, "hour must be an integer"),
        (3, 1.5, "minute must be an integer"),
    ],
)
def test_out_of_domain(hour, minute, message):
    with pytest.raises(ValueError, match=message):
        format_fuzzy_time(hour, minute)
