import argparse
from pathlib import Path

import main

FIXTURES = Path(__file__).parent / "fixtures"

# Desert and amber block each other in the hallway
DEADLOCK = """#############
#...D.A.....#
###.#B#C#.###
  #A#B#C#D#
  #########
"""


def make_args(diagram, **overrides):
    options = dict(
        diagram=diagram, unfold=False, show_path=False, progress=False, verbose=False
    )
    options.update(overrides)
    return argparse.Namespace(**options)


class TestMain:
    def test_prints_least_energy(self, capsys):
        assert main.run(make_args(FIXTURES / "example.txt")) == 0
        assert capsys.readouterr().out.strip() == "12521"

    def test_progress_bar(self, capsys):
        assert main.run(make_args(FIXTURES / "example.txt", progress=True)) == 0
        assert capsys.readouterr().out.strip() == "12521"

    def test_show_path(self, capsys):
        assert main.run(make_args(FIXTURES / "example.txt", show_path=True)) == 0

        out = capsys.readouterr().out.strip().split("\n")
        assert out[-1] == "12521"
        assert "room" in "\n".join(out)
        assert "#...........#" in out

    def test_unsolvable(self, tmp_path, capsys):
        diagram = tmp_path / "burrow.txt"
        diagram.write_text(DEADLOCK)

        assert main.run(make_args(diagram)) == 1
        assert capsys.readouterr().out.strip() == "No solution"

    def test_malformed_diagram(self, tmp_path, capsys):
        diagram = tmp_path / "burrow.txt"
        diagram.write_text("#############\n#...........#\n###E#C#B#D###\n")
        assert main.run(make_args(diagram)) == 1
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path):
        assert main.run(make_args(tmp_path / "nowhere.txt")) == 1
