import json
from pathlib import Path

import pytest

from blogsite.main import main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)


def test_config_command_prints_json(capsys):
    assert main(["config"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["site"]["title"] == "strf0x's blog"
    assert [link["label"] for link in data["primaryNav"]] == ["blog", "authors", "about", "tags"]


def test_check_command_exit_codes(write_article, tmp_path: Path):
    path = write_article(name="post")
    (path.parent / "cover.png").write_bytes(b"")
    authors = tmp_path / "authors"
    authors.mkdir()
    (authors / "strf0x.md").write_text("---\nname: strf0x\n---\n")

    args = ["check", "--content-dir", str(tmp_path / "blog"), "--authors-dir", str(authors)]
    assert main(args) == 0

    write_article(name="broken", tags="")
    assert main(args) == 1


def test_list_command(write_article, tmp_path: Path, capsys):
    for day in range(1, 8):
        write_article(name=f"post-{day}", date=f"2024-01-0{day}", tags="rag" if day % 2 else "llm")
    content = str(tmp_path / "blog")

    assert main(["list", "--content-dir", content]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[1] for line in lines] == [f"post-{day}" for day in range(7, 0, -1)]

    assert main(["list", "--content-dir", content, "--page", "3"]) == 0
    assert [line.split()[1] for line in capsys.readouterr().out.splitlines()] == ["post-1"]

    assert main(["list", "--content-dir", content, "--tag", "llm"]) == 0
    assert [line.split()[1] for line in capsys.readouterr().out.splitlines()] == ["post-6", "post-4", "post-2"]

    assert main(["list", "--content-dir", content, "--page", "4"]) == 1


def test_list_command_missing_directory(tmp_path: Path):
    assert main(["list", "--content-dir", str(tmp_path / "missing")]) == 1
