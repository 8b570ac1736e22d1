from sysdemos.timing import busy_loop, format_timespec_diff, format_timeval_diff, main


def test_timespec_fraction_is_zero_padded():
    assert format_timespec_diff(0, 1_500_000) == "Spent time 2 (timespec): 1.500000 ms"


def test_timespec_is_relative():
    assert format_timespec_diff(10, 10 + 2_000_123) == format_timespec_diff(0, 2_000_123)


def test_timeval_whole_seconds_and_micros():
    assert format_timeval_diff((1, 0), (2, 500_000)) == "Spent time 1 (timeval):  1500 ms"


def test_timeval_negative_micros_are_folded():
    text = format_timeval_diff((1, 900_000), (2, 100_000))
    assert text.startswith("Spent time 1 (timeval):  ")
    assert int(text.split()[-2]) > 1000


def test_busy_loop_counts_iterations():
    assert busy_loop(3, 4) == 3 * 4
    assert busy_loop(0, 5) == 0


def test_main_prints_four_measurements(capsys):
    assert main(["--outer", "2", "--inner", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(" (")[0] for line in lines] == [
        "Spent time 1",
        "Spent time 2",
        "Spent time 3",
        "Spent time 4",
    ]