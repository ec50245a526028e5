"""CLI tests: Typer commands over a catalog file set through the environment."""

import json

import pytest
from typer.testing import CliRunner

from fishfinder.cli.main import ExitCodes, app, get_exit_code_for_error
from fishfinder.utils.exceptions import ConfigurationError, LoadError

runner = CliRunner()


@pytest.fixture
def env(catalog_file):
    return {"FISHFINDER_CATALOG_PATH": str(catalog_file)}


def invoke(args, env, **kwargs):
    return runner.invoke(app, args, env=env, **kwargs)


def json_ids(result):
    return [fish["id"] for fish in json.loads(result.stdout)["fish"]]


def test_search_name_table_output(env):
    result = invoke(["search", "name", "carp"], env)
    assert result.exit_code == 0
    assert "Golden Carp" in result.stdout
    assert "Silver Carp" in result.stdout


def test_search_lure_json(env):
    result = invoke(["--quiet", "search", "lure", "red", "--json"], env)
    assert result.exit_code == 0
    assert json_ids(result) == [1]


def test_search_spot_policies(env):
    include = invoke(["--quiet", "search", "spot", "3", "--json"], env)
    specific = invoke(
        ["--quiet", "search", "spot", "3", "--policy", "specific-only", "--json"], env
    )
    assert json_ids(include) == [1, 2]
    assert json_ids(specific) == [2]


def test_default_spot_policy_from_settings(env):
    env = {**env, "FISHFINDER_DEFAULT_SPOT_POLICY": "specific-only"}
    result = invoke(["--quiet", "search", "spot", "3", "--json"], env)
    assert json_ids(result) == [2]


def test_search_spot_zero_finds_nothing(env):
    result = invoke(["search", "spot", "0"], env)
    assert result.exit_code == 0
    assert "No fish found" in result.stdout


def test_unknown_mode_is_rejected(env):
    result = invoke(["search", "colour", "red"], env)
    assert result.exit_code != 0


def test_table_lists_every_fish(env):
    result = invoke(["--quiet", "table", "--json"], env)
    assert result.exit_code == 0
    assert json_ids(result) == [1, 2]


def test_table_renders_columns(env):
    result = invoke(["table"], env)
    assert "Any spot" in result.stdout
    assert "Event Only" in result.stdout


def test_missing_catalog_degrades_to_empty(tmp_path):
    env = {"FISHFINDER_CATALOG_PATH": str(tmp_path / "missing.json")}
    result = invoke(["--quiet", "search", "name", "carp"], env)
    assert result.exit_code == 0
    assert "Could not load fish catalog" in result.stderr
    assert "No fish found" in result.stdout


def test_failed_load_keeps_json_output_parseable(tmp_path):
    env = {"FISHFINDER_CATALOG_PATH": str(tmp_path / "missing.json")}
    result = invoke(["--quiet", "search", "spot", "3", "--json"], env)
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"fish": []}
    assert "Could not load fish catalog" in result.stderr
    assert "Continuing with an empty catalog" in result.stderr


def test_json_output_carries_fish_image_location(env):
    result = invoke(["--quiet", "search", "name", "golden", "--json"], env)
    (fish,) = json.loads(result.stdout)["fish"]
    assert fish["image"] == "/fish/Golden_Carp.webp"
    assert fish["spots"] == "any"


def test_map_location(env):
    assert "FishingMap_Names.png" in invoke(["map"], env).stdout


def test_info_shows_lure_rarity_and_map_sheets(env):
    result = invoke(["info"], env)
    assert result.exit_code == 0
    assert "/lures.png" in result.stdout
    assert "/rarity.jpg" in result.stdout
    assert "/FishingMap_Names.png" in result.stdout


def test_bad_spot_policy_setting_exits_with_configuration_error(env):
    env = {**env, "FISHFINDER_DEFAULT_SPOT_POLICY": "everywhere"}
    result = invoke(["table"], env)
    assert result.exit_code == ExitCodes.CONFIGURATION_ERROR


def test_config_validate(env):
    result = invoke(["config-validate"], env)
    assert result.exit_code == 0
    assert "Default Spot Policy" in result.stdout


def test_config_validate_flags_missing_catalog(tmp_path):
    env = {"FISHFINDER_CATALOG_PATH": str(tmp_path / "missing.json")}
    result = invoke(["config-validate"], env)
    assert result.exit_code == ExitCodes.CONFIGURATION_ERROR


def test_shell_session(env):
    commands = "\n".join(
        [
            "carp",
            ":mode spot",
            "3",
            ":policy specific-only",
            ":mode colour",
            ":table",
            ":quit",
        ]
    )
    result = invoke(["shell"], env, input=commands + "\n")
    assert result.exit_code == 0
    assert "Searching by spot" in result.stdout
    assert "Spot policy: specific-only" in result.stdout
    assert "Unknown mode 'colour'" in result.stderr
    assert "All Fish" in result.stdout


def test_shell_exits_on_end_of_input(env):
    result = invoke(["shell"], env, input="silver\n")
    assert result.exit_code == 0
    assert "Silver Carp" in result.stdout


def test_exit_codes_follow_error_category():
    assert (
        get_exit_code_for_error(ConfigurationError("bad"))
        == ExitCodes.CONFIGURATION_ERROR
    )
    assert get_exit_code_for_error(LoadError("down", network=True)) == ExitCodes.NETWORK_ERROR
    assert get_exit_code_for_error(LoadError("bad json")) == ExitCodes.DATA_ERROR
    assert get_exit_code_for_error(RuntimeError("boom")) == ExitCodes.GENERAL_ERROR


def test_shell_refuses_searches_while_table_shown(env):
    commands = "\n".join([":table", "silver", ":mode lure", ":table", ":quit"])
    result = invoke(["shell"], env, input=commands + "\n")
    assert result.exit_code == 0
    assert result.stderr.count("Close the table first") == 2
    assert "Searching by lure" not in result.stdout


def test_shell_lists_every_fish_after_table_closes(env):
    result = invoke(["shell"], env, input=":table\n:table\n:quit\n")
    assert result.exit_code == 0
    assert result.stdout.count("All Fish") == 2
    assert result.stdout.count("Silver Carp") == 2


def test_shell_info_view_shows_rarity_and_map(env):
    result = invoke(["shell"], env, input=":info\n:quit\n")
    assert "Rarity: /rarity.jpg" in result.stdout
    assert "Map: /FishingMap_Names.png" in result.stdout
