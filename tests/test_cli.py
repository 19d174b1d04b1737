from sacheatfinder.cli import main


def test_help(capsys):
    assert main(["--help"]) == 0
    assert "Syntax:" in capsys.readouterr().out


def test_short_help_stops_before_search(capsys):
    assert main(["-h", "--min", "abc"]) == 0
    out = capsys.readouterr().out
    assert "Syntax:" in out
    assert "non-numeric" not in out


def test_non_numeric_value(capsys):
    assert main(["--min", "abc"]) == 1
    assert "Error, non-numeric character !" in capsys.readouterr().out


def test_missing_value(capsys):
    assert main(["--max"]) == 1
    assert "Error, non-numeric character !" in capsys.readouterr().out


def test_cuda_mode_unsupported(capsys):
    assert main(["--calc-mode", "2"]) == 1
    assert "CUDA not supported" in capsys.readouterr().out


def test_empty_range_reports_and_succeeds(capsys):
    assert main(["--cli"]) == 0
    assert "Search range is too small" in capsys.readouterr().out


def test_unknown_argument(capsys):
    main(["--bogus", "--min", "5", "--max", "2"])
    out = capsys.readouterr().out
    assert "Unknown argument: --bogus" in out
    assert "can't be greater than" in out


def test_search_finds_code(capsys):
    assert main(["--cli", "--min", "20810700", "--max", "20810800"]) == 0
    out = capsys.readouterr().out
    assert "ASNAEB" in out
    assert "0x555fc201" in out
    assert "Number of results: 1" in out


def test_search_process_mode(capsys):
    assert main(["--calc-mode", "1", "--min", "299376700", "--max", "299376800"]) == 0
    out = capsys.readouterr().out
    assert "YECGAA" in out
    assert "Number of results: 1" in out


def test_unknown_mode_falls_back_to_threads(capsys):
    assert main(["--calc-mode", "7", "--min", "0", "--max", "60000"]) == 0
    out = capsys.readouterr().out
    assert "Running with thread mode" in out
    assert "Number of results: 0" in out