"""Tests for helpdesk_search.config.

Checks that `load_config` resolves data file paths and rejects malformed
config files.
"""

from pathlib import Path

import pytest

from helpdesk_search.config import AppConfig, load_config


def _write_config(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_relative_paths_resolve_against_config_dir(tmp_path):
    cfg_path = _write_config(
        tmp_path / "config" / "search.yaml",
        "data_files:\n"
        "  organizations: ../data/organizations.json\n"
        "  users: ../data/users.json\n"
        "  tickets: ../data/tickets.json\n",
    )
    cfg = load_config(cfg_path)
    assert cfg.organizations == tmp_path / "config" / ".." / "data" / "organizations.json"
    assert cfg.users.name == "users.json"
    assert cfg.tickets.parent.resolve() == (tmp_path / "data").resolve()


def test_absolute_paths_are_kept(tmp_path):
    orgs = tmp_path / "elsewhere" / "orgs.json"
    cfg_path = _write_config(
        tmp_path / "search.yaml",
        f"data_files:\n  organizations: {orgs}\n  users: u.json\n  tickets: t.json\n",
    )
    cfg = load_config(cfg_path)
    assert cfg.organizations == orgs
    assert cfg.users == tmp_path / "u.json"


def test_json_config_is_accepted(tmp_path):
    cfg_path = _write_config(
        tmp_path / "search.json",
        '{"data_files": {"organizations": "o.json", "users": "u.json", "tickets": "t.json"}}',
    )
    cfg = load_config(cfg_path)
    assert cfg == AppConfig(
        organizations=tmp_path / "o.json",
        users=tmp_path / "u.json",
        tickets=tmp_path / "t.json",
    )


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "missing the 'data_files' mapping"),
        ("- a\n- b\n", "must contain a mapping"),
        ("data_files: nope\n", "missing the 'data_files' mapping"),
        ("data_files:\n  organizations: o.json\n  users: u.json\n", "data_files.tickets"),
        (
            "data_files:\n  organizations: o.json\n  users: ''\n  tickets: t.json\n",
            "data_files.users",
        ),
        ("data_files: [unclosed\n", "Failed to parse"),
    ],
)
def test_malformed_config(tmp_path, text, message):
    cfg_path = _write_config(tmp_path / "search.yaml", text)
    with pytest.raises(ValueError, match=message):
        load_config(cfg_path)


def test_with_overrides_replaces_only_given_paths(tmp_path):
    cfg = AppConfig(
        organizations=tmp_path / "o.json",
        users=tmp_path / "u.json",
        tickets=tmp_path / "t.json",
    )
    updated = cfg.with_overrides(users="other/users.json", tickets=None)

    assert updated.organizations == cfg.organizations
    assert updated.users == Path("other/users.json")
    assert updated.tickets == cfg.tickets
    # Original is untouched
    assert cfg.users == tmp_path / "u.json"


def test_shipped_config_points_at_sample_data():
    repo_root = Path(__file__).resolve().parent.parent
    cfg = load_config(repo_root / "config" / "search.yaml")
    for path in (cfg.organizations, cfg.users, cfg.tickets):
        assert path.exists(), path
