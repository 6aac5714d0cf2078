import pytest

import json

from pathlib import Path

from textwrap import dedent

from recipemd.scripts.recipemd import main


@pytest.fixture
def recipe_file(tmp_path: Path) -> Path:
    path = tmp_path / "pie.md"
    path.write_text(
        dedent(
            """
            # Pie

            A simple pie.

            *dessert*

            **1 pie, 8 slices**

            ---

            - *1* dish

            ## Filling

            - *3* apples
            - *1 1/2 cups* sugar

            ---

            Bake it.
            """
        ).lstrip(),
        encoding="utf-8",
    )
    return path


def test_text(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file)])
    out = capsys.readouterr().out
    assert out == (
        "Pie\n\n"
        "A simple pie.\n\n"
        "Tags: dessert\n\n"
        "Yields: 1 pie, 8 slices\n\n"
        "1 dish\n\n## Filling\n3 apples\n1 1/2 cups sugar\n\n"
        "Bake it.\n"
    )


def test_title(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "--title"])
    assert capsys.readouterr().out == "Pie\n"


def test_ingredients(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "-i"])
    assert capsys.readouterr().out == (
        "1 dish\n\n## Filling\n3 apples\n1 1/2 cups sugar\n"
    )


def test_flatten(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "-i", "--flatten"])
    assert capsys.readouterr().out == "1 dish\n3 apples\n1 1/2 cups sugar\n"


def test_json(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Pie"
    assert data["yields"] == [
        {"factor": "1", "unit": "pie"},
        {"factor": "8", "unit": "slices"},
    ]
    assert data["ingredient_groups"][0]["ingredients"][1] == {
        "name": "sugar",
        "amount": {"factor": "1.5", "unit": "cups"},
        "link": None,
    }


def test_html(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "--html"])
    out = capsys.readouterr().out
    assert out.startswith('<article class="rmd-recipe">')
    assert "<h2>Filling</h2>" in out


def test_multiply(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "-i", "--multiply", "2"])
    assert capsys.readouterr().out == (
        "2 dish\n\n## Filling\n6 apples\n3 cups sugar\n"
    )


def test_yield(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(recipe_file), "-i", "--yield", "4 slices"])
    assert capsys.readouterr().out == (
        "1/2 dish\n\n## Filling\n1 1/2 apples\n3/4 cups sugar\n"
    )


def test_multiply_and_yield_exclusive(recipe_file: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(recipe_file), "-m", "2", "-y", "2 pie"])


def test_invalid_factor(recipe_file: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(recipe_file), "-m", "lots"])


def test_unknown_yield(
    recipe_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([str(recipe_file), "--yield", "3 cakes"])
    assert exc_info.value.code == 1
    assert "Error: Recipe has no yield given in 'cakes'." in capsys.readouterr().err


def test_invalid_recipe(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "bad.md"
    path.write_text("Not a title\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main([str(path)])
    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith(f"{path}: Error: At line 1 column 1:")
    assert "Title (heading_open with level h1) required" in err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.md")])
    assert exc_info.value.code == 1
    assert "missing.md: Error:" in capsys.readouterr().err


def test_not_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin1.md"
    path.write_bytes(b"# T\xff\n\n---\n")
    with pytest.raises(SystemExit) as exc_info:
        main([str(path)])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith(f"{path}: Error:")
