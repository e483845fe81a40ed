from dining_philosophers.cli import main


def test_wrong_argument_count_prints_usage(capsys):
    assert main(["1"]) == 0
    assert capsys.readouterr().out.startswith("Wrong usage.")


def test_too_many_arguments_prints_usage(capsys):
    assert main(["1", "2", "3", "4", "5", "6"]) == 0
    assert "Wrong usage." in capsys.readouterr().out


def test_zero_philosophers_is_argument_error(capsys):
    assert main(["0", "100", "100", "100"]) == 1
    assert capsys.readouterr().out.startswith("Argument error.")


def test_negative_time_is_argument_error(capsys):
    assert main(["2", "-100", "100", "100"]) == 1
    assert "Argument error." in capsys.readouterr().out


def test_too_many_philosophers_is_argument_error(capsys):
    assert main(["201", "100", "100", "100"]) == 1
    assert "philo max number is 200" in capsys.readouterr().out


def test_zero_meals_runs_silently(capsys):
    assert main(["2", "100", "10", "10", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_lone_philosopher_run(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")