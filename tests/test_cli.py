"""End-to-end tests for the ramp-tool CLI (ramp_tool.__main__.main)."""

import json
from pathlib import Path

import pytest
from ramp_tool.__main__ import main
from ramp_tool.core.presets import STEPS


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty repo root with no RAMP_TOOL_* settings."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for name in ('FLAVOUR', 'TOLERANCE', 'MAX_ITERATIONS', 'LOG_LEVEL'):
        monkeypatch.delenv(f'RAMP_TOOL_{name}', raising=False)
    return tmp_path


def _json(capsys) -> dict:
    return json.loads(capsys.readouterr().out)


class TestRampCommand:
    def test_text_output(self, capsys):
        main(['ramp', '#0066ff'])
        out = capsys.readouterr().out
        assert out.startswith('[Ramp] Default Ramp - #0066ff')
        assert 'PASS' in out

    def test_json_tokens(self, capsys):
        main(['ramp', '0066FF', '--json', '--name', 'Blue'])
        obj = _json(capsys)
        assert obj['seed'] == '#0066ff'
        assert [s['step'] for s in obj['steps']] == list(STEPS)
        assert obj['steps'][0]['token'] == 'Blue/100'

    def test_flat_tokens(self, capsys):
        main(['ramp', '#0066ff', '-j', '-n', 'Blue', '--organisation', 'flat'])
        assert _json(capsys)['steps'][9]['token'] == 'Blue-950'

    def test_flavour_flag(self, capsys):
        main(['ramp', '#0066ff', '--flavour', 'concrete', '--json'])
        assert _json(capsys)['title'] == '[Ramp] Concrete Ramp - #0066ff'

    def test_curve_flags(self, capsys):
        main(['ramp', '#0066ff', '--peak-chroma', '80', '--peak', '500', '--falloff', 'steep', '--json'])
        assert _json(capsys)['title'] == '[Ramp] Custom Curve (500) - #0066ff'

    def test_target_override(self, capsys):
        main(['ramp', '#0066ff', '--target', '950=15', '--json'])
        steps = {s['step']: s for s in _json(capsys)['steps']}
        assert steps['950']['target'] == 15.0

    def test_contrast_only(self, capsys):
        main(['ramp', '#0066ff', '--contrast-only', '--json'])
        obj = _json(capsys)
        assert obj['title'] == '[Ramp] Contrast Ramp - #0066ff'
        assert obj['tolerance'] == 0.01

    def test_png(self, capsys, tmp_path: Path):
        path = tmp_path / 'swatches' / 'blue.png'
        main(['ramp', '#0066ff', '--png', str(path), '--json'])
        captured = capsys.readouterr()
        assert path.is_file()
        assert json.loads(captured.out)['png'] == str(path)
        assert 'wrote' in captured.err

    def test_invalid_seed(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['ramp', 'not-a-color'])
        assert exc.value.code == 1
        assert 'Invalid hex colour' in capsys.readouterr().err

    def test_invalid_stop(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['ramp', '#0066ff', '--stop', '450=1'])
        assert exc.value.code == 1
        assert 'Error:' in capsys.readouterr().err


class TestFailOnMiss:
    def test_within_threshold(self, capsys):
        main(['ramp', '#0066ff', '--fail-on-miss', '100'])
        assert 'FAIL:' not in capsys.readouterr().out

    def test_miss_exits_nonzero(self, capsys):
        # a single iteration leaves the darkest steps far from their targets
        with pytest.raises(SystemExit) as exc:
            main(['ramp', '#0066ff', '--max-iterations', '1', '-m', '0.15'])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert '[Ramp] Default Ramp' in out
        assert 'missed their contrast target' in out


class TestEnvironment:
    def test_flavour_from_env(self, capsys, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('RAMP_TOOL_FLAVOUR', 'stone')
        main(['ramp', '#0066ff', '--json'])
        assert _json(capsys)['title'] == '[Ramp] Stone Ramp - #0066ff'

    def test_flag_beats_env(self, capsys, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('RAMP_TOOL_FLAVOUR', 'stone')
        main(['ramp', '#0066ff', '-f', 'bright', '--json'])
        assert _json(capsys)['title'] == '[Ramp] Default Ramp - #0066ff'

    def test_dotenv_file(self, capsys, monkeypatch: pytest.MonkeyPatch, isolated_env: Path):
        (isolated_env / '.env').write_text('RAMP_TOOL_TOLERANCE=0.05\n')
        main(['ramp', '#0066ff', '--json'])
        captured = capsys.readouterr()
        assert json.loads(captured.out)['tolerance'] == 0.05
        assert 'loaded' in captured.err
        monkeypatch.delenv('RAMP_TOOL_TOLERANCE', raising=False)

    def test_invalid_env(self, capsys, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('RAMP_TOOL_TOLERANCE', 'abc')
        with pytest.raises(SystemExit) as exc:
            main(['ramp', '#0066ff'])
        assert exc.value.code == 1
        assert 'RAMP_TOOL_TOLERANCE' in capsys.readouterr().err


class TestOtherCommands:
    def test_curve(self, capsys):
        main(['curve', '--peak-chroma', '60', '--json'])
        steps = {s['step']: s for s in _json(capsys)['steps']}
        assert steps['400']['multiplier'] == 0.6
        assert steps['100']['multiplier'] == pytest.approx(0.6 * 0.0625)

    def test_curve_text(self, capsys):
        main(['curve'])
        assert '█' in capsys.readouterr().out

    def test_inspect(self, capsys):
        main(['inspect', '#777777', '--json'])
        obj = _json(capsys)
        assert obj['seed'] == '#777777'
        assert obj['contrast'] == 4.5
        assert obj['nearest_step'] == '700'

    def test_flavours(self, capsys):
        main(['flavours', '--json'])
        obj = _json(capsys)
        assert [s['step'] for s in obj['steps']] == ['bright', 'stone', 'concrete']
        assert obj['steps'][0]['multipliers']['400'] == 1.0

    def test_sweep(self, capsys):
        main(['sweep', '--hues', '4', '--json'])
        obj = _json(capsys)
        assert len(obj['steps']) == 4
        assert 0.0 <= obj['share_within'] <= 1.0
        assert obj['summary']['total'] == 4


class TestHelp:
    def test_help_lists_commands(self, capsys):
        main(['help'])
        out = capsys.readouterr().out
        for name in ('curve', 'flavours', 'inspect', 'ramp', 'sweep'):
            assert name in out

    def test_help_topic(self, capsys):
        main(['help', 'ramp'])
        assert 'Generate a 10-step colour ramp' in capsys.readouterr().out

    def test_help_unknown_topic(self):
        with pytest.raises(SystemExit) as exc:
            main(['help', 'nope'])
        assert exc.value.code == 1

    def test_no_command(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
