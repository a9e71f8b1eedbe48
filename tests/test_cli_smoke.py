"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and don't crash. Uses Click's
CliRunner with a temporary config file so the user's settings are never
touched.
"""

import logging

import pytest
from click.testing import CliRunner

from hubble.cli import main
from hubble.cli.main import cli
from hubble.models import HubbleConfig


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the handler installed by setup_logging after each test."""
    yield
    if main._handler is not None:
        logging.getLogger().removeHandler(main._handler)
        main._handler.close()
        main._handler = None


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Hubble' in result.output
        assert '--config' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", [
        ['color'],
        ['color', 'decode'],
        ['color', 'encode'],
        ['color', 'normalize'],
        ['color', 'random'],
        ['config'],
        ['config', 'show'],
        ['config', 'set'],
    ])
    def test_subcommand_help(self, runner, command):
        """Test every subcommand has help."""
        result = runner.invoke(cli, command + ['--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestColorCommands:
    """Test color commands against a temporary config."""

    def test_decode(self, runner, config_path):
        """Test decoding prints channels and the canonical form."""
        result = runner.invoke(cli, ['--config', str(config_path), 'color', 'decode', '#F80', '#11223380'])
        assert result.exit_code == 0
        assert 'rgb(255, 136, 0)' in result.output
        assert '-> #FF8800FF' in result.output
        assert '-> #11223380' in result.output

    def test_decode_reports_all_failures(self, runner, config_path):
        """Test valid values still print and every failure is listed."""
        result = runner.invoke(
            cli, ['--config', str(config_path), 'color', 'decode', '#FF0000', 'FF0000', '#12345']
        )
        assert result.exit_code == 1
        assert '-> #FF0000FF' in result.output
        assert 'Failed to decode colors: 2 of 3 operations failed' in result.output
        assert "missing '#'" in result.output

    def test_encode(self, runner, config_path):
        """Test encoding 8-bit channels."""
        result = runner.invoke(
            cli, ['--config', str(config_path), 'color', 'encode', '255', '128', '0', '--no-include-alpha']
        )
        assert result.exit_code == 0
        assert result.output.strip() == '#FF8000'

    def test_encode_with_alpha(self, runner, config_path):
        """Test encoding with alpha."""
        result = runner.invoke(
            cli,
            ['--config', str(config_path), 'color', 'encode', '255', '128', '0', '-a', '0.5', '--include-alpha'],
        )
        assert result.exit_code == 0
        assert result.output.strip() == '#FF800080'

    def test_encode_rejects_out_of_range_channel(self, runner, config_path):
        """Test channels above 255 are a usage error."""
        result = runner.invoke(cli, ['--config', str(config_path), 'color', 'encode', '256', '0', '0'])
        assert result.exit_code == 2

    def test_normalize_uses_fallback(self, runner, config_path):
        """Test invalid values become the default transparent fallback."""
        result = runner.invoke(
            cli, ['--config', str(config_path), 'color', 'normalize', '#abc', 'nope', '--include-alpha']
        )
        assert result.exit_code == 0
        assert result.output.split() == ['#AABBCCFF', '#00000000']

    def test_normalize_uses_configured_fallback(self, runner, saved_config):
        """Test the fallback color comes from the config file."""
        result = runner.invoke(
            cli, ['--config', str(saved_config), 'color', 'normalize', 'nope', '--no-include-alpha']
        )
        assert result.exit_code == 0
        assert result.output.strip() == '#FF00FF'

    def test_random_seed_is_reproducible(self, runner, config_path):
        """Test the same seed prints the same colors."""
        args = ['--config', str(config_path), 'color', 'random', '--count', '3', '--seed', '42']
        first = runner.invoke(cli, args)
        second = runner.invoke(cli, args)

        assert first.exit_code == 0
        lines = first.output.split()
        assert len(lines) == 3
        assert all(line.startswith('#') and len(line) == 7 for line in lines)
        assert first.output == second.output

    def test_random_seed_from_config(self, runner, saved_config):
        """Test the configured seed and alpha setting are used."""
        args = ['--config', str(saved_config), 'color', 'random', '-n', '2']
        first = runner.invoke(cli, args)
        second = runner.invoke(cli, args)

        assert first.exit_code == 0
        assert first.output == second.output
        assert all(line.endswith('FF') and len(line) == 9 for line in first.output.split())


@pytest.mark.integration
class TestConfigCommands:
    """Test config commands against a temporary config."""

    def test_show(self, runner, saved_config):
        """Test show prints every field."""
        result = runner.invoke(cli, ['--config', str(saved_config), 'config', 'show'])
        assert result.exit_code == 0
        assert f'Config file: {saved_config}' in result.output
        assert 'fallback_color: #FF00FF' in result.output
        assert 'include_alpha: True' in result.output
        assert 'random_seed: 7' in result.output

    def test_show_defaults_without_file(self, runner, config_path):
        """Test show works before any config was saved and does not create one."""
        result = runner.invoke(cli, ['--config', str(config_path), 'config', 'show'])
        assert result.exit_code == 0
        assert 'fallback_color: #00000000' in result.output
        assert not config_path.exists()

    def test_set(self, runner, config_path):
        """Test set saves the new values."""
        result = runner.invoke(
            cli, ['--config', str(config_path), 'config', 'set', '--fallback-color', '#0F0', '--random-seed', '3']
        )
        assert result.exit_code == 0
        assert f'Saved to {config_path}' in result.output

        saved = HubbleConfig.load_or_default(config_path)
        assert saved.fallback_color == '#0F0'
        assert saved.random_seed == 3

    def test_set_keeps_other_fields(self, runner, saved_config):
        """Test set only changes the given fields and backs up the old file."""
        result = runner.invoke(cli, ['--config', str(saved_config), 'config', 'set', '--random-seed', '11'])
        assert result.exit_code == 0

        saved = HubbleConfig.load_or_default(saved_config)
        assert saved.random_seed == 11
        assert saved.fallback_color == '#FF00FF'
        assert saved_config.with_suffix('.json.bak').exists()

    def test_set_rejects_invalid_color(self, runner, config_path):
        """Test an undecodable fallback color is reported and nothing is saved."""
        result = runner.invoke(cli, ['--config', str(config_path), 'config', 'set', '--fallback-color', 'nope'])
        assert result.exit_code == 1
        assert "Invalid configuration value for 'fallback_color'" in result.output
        assert not config_path.exists()

    def test_corrupted_config_reported(self, runner, config_path):
        """Test an invalid config file is reported with a hint."""
        config_path.write_text('{ "include_alpha": true, }', encoding='utf-8')

        result = runner.invoke(cli, ['--config', str(config_path), 'config', 'show'])
        assert result.exit_code == 1
        assert 'ERROR: Configuration file' in result.output
        assert config_path.read_text(encoding='utf-8') == '{ "include_alpha": true, }'

    def test_corrupted_config_reported_once(self, runner, config_path):
        """Test a config failure shows one ERROR line plus its hint, with no log records."""
        config_path.write_text('{ "include_alpha": true, }', encoding='utf-8')

        result = runner.invoke(cli, ['--config', str(config_path), 'config', 'show'])
        assert result.exit_code == 1
        assert result.output.count('ERROR') == 1
        assert result.output.startswith('ERROR: Configuration file has a trailing comma')
        assert f'Remove the trailing comma from {config_path}' in result.output
        assert 'hubble.utils.persistence' not in result.output
        assert 'errors.pydantic.dev' not in result.output

    def test_invalid_config_value_reported_once(self, runner, config_path):
        """Test a bad value in the file is reported once, naming the field."""
        config_path.write_text('{"fallback_color": "red"}', encoding='utf-8')

        result = runner.invoke(cli, ['--config', str(config_path), 'color', 'normalize', '#FFF'])
        assert result.exit_code == 1
        assert result.output.count('ERROR') == 1
        assert "Invalid configuration value for 'fallback_color'" in result.output

    def test_clear_random_seed(self, runner, saved_config):
        """Test a stored seed can be removed while other fields are kept."""
        result = runner.invoke(cli, ['--config', str(saved_config), 'config', 'set', '--clear-random-seed'])
        assert result.exit_code == 0
        assert 'random_seed: None' in result.output

        saved = HubbleConfig.load_or_default(saved_config)
        assert saved.random_seed is None
        assert saved.fallback_color == '#FF00FF'

    def test_clear_random_seed_conflicts_with_random_seed(self, runner, saved_config):
        """Test setting and clearing the seed at once is a usage error."""
        result = runner.invoke(
            cli, ['--config', str(saved_config), 'config', 'set', '--random-seed', '3', '--clear-random-seed']
        )
        assert result.exit_code == 2
        assert HubbleConfig.load_or_default(saved_config).random_seed == 7
