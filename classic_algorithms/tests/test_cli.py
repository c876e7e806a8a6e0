import json

from classic_algorithms.__main__ import main


def test_cli_list(capsys):
    assert main(["list"]) == 0
    names = capsys.readouterr().out.split()
    assert "bubble_sort" in names
    assert "bfs_shortest_path" in names


def test_cli_list_by_category(capsys):
    assert main(["list", "--category", "strings"]) == 0
    assert capsys.readouterr().out.split() == [
        "reverse_string", "is_palindrome", "char_frequency", "is_anagram",
    ]


def test_cli_run_decodes_json_arguments(capsys):
    assert main(["run", "two_sum", "[2, 7, 11, 15]", "9"]) == 0
    assert json.loads(capsys.readouterr().out) == [0, 1]


def test_cli_run_falls_back_to_raw_strings(capsys):
    assert main(["run", "is_palindrome", "racecar"]) == 0
    assert json.loads(capsys.readouterr().out) is True


def test_cli_run_reports_invalid_input(capsys):
    assert main(["run", "factorial", "-1"]) == 2
    assert "error" in capsys.readouterr().err


def test_cli_run_unknown_algorithm(capsys):
    assert main(["run", "nope"]) == 2


def test_cli_config_file_is_layered(tmp_path, capsys):
    config = tmp_path / "cli.yaml"
    config.write_text("logging:\n  level: ERROR\n", encoding="utf-8")
    assert main(["--config", str(config), "run", "gcd", "12", "18"]) == 0
    assert json.loads(capsys.readouterr().out) == 6


def test_cli_list_long_shows_summaries(capsys):
    assert main(["list", "--long", "--category", "graph"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == [
        "dfs", "dfs_iterative", "bfs", "bfs_shortest_path",
    ]
    assert all(len(line.split()) > 1 for line in lines)


def test_cli_run_wrong_argument_count(capsys):
    assert main(["run", "gcd", "12"]) == 2
    assert "GreatestCommonDivisor" in capsys.readouterr().err


def test_cli_run_graph_algorithm_missing_start(capsys):
    assert main(["run", "dfs", '{"A": []}']) == 2
    assert "error" in capsys.readouterr().err
