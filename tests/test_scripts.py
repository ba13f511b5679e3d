import json

import pytest

from scripts import benchmark_search, find_path


def test_find_path_cli_reference_grid(capsys):
    assert find_path.main(["--start", "0", "0", "--goal", "9", "9"]) == 0
    out = capsys.readouterr().out
    assert "Path found." in out
    assert "Cost: 18.0" in out


def test_find_path_cli_exports(tmp_path, capsys):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("0 0 0\n1 1 0\n0 0 0\n")
    output = tmp_path / "result.json"
    image = tmp_path / "path.png"

    code = find_path.main(["-i", str(grid_file), "--goal", "2", "0",
                           "-o", str(output), "--image", str(image)])
    assert code == 0
    data = json.loads(output.read_text())
    assert data["length"] == 7
    assert image.exists()


def test_find_path_cli_no_path(tmp_path, capsys):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("0 1 0\n0 1 0\n")
    assert find_path.main(["-i", str(grid_file), "--precheck"]) == 1
    assert "No path found." in capsys.readouterr().out


def test_find_path_cli_invalid_endpoint(capsys):
    assert find_path.main(["--start", "1", "1"]) == 2
    assert "obstacle" in capsys.readouterr().out


def test_find_path_cli_iteration_cap(capsys):
    assert find_path.main(["--max-iterations", "3", "--policy", "contains"]) == 1


def test_benchmark_costs_match():
    stats, mismatches = benchmark_search.run_benchmark(trials=10, size=8, density=0.25, seed=3)
    assert mismatches["lazy"] == 0
    assert len(stats["lazy"]["expanded"]) == 10


def test_find_path_cli_rejects_non_object_config(tmp_path, capsys):
    config_file = tmp_path / "search.json"
    config_file.write_text(json.dumps(["lazy"]))
    assert find_path.main(["--config", str(config_file)]) == 2
    assert "JSON object" in capsys.readouterr().out


@pytest.mark.parametrize("trials", ["0", "-3"])
def test_benchmark_requires_positive_trials(trials):
    with pytest.raises(SystemExit):
        benchmark_search.main(["--trials", trials])
