""" Feature tests for the application container, command-line options and console entry points. """

import sys

import pytest

from afterburner_magic import Afterburner, AfterburnerOptions
from afterburner_magic import main_annotate, main_html
from afterburner_magic.util.cmdline import CmdlineOptions
from afterburner_magic.util.entrypoints import EntryPoint, EntryPointSelector


def _base_args(tmp_path) -> list:
    """ Keep the log and config inside the test directory instead of the user's home. """
    return [f"--log={tmp_path / 'status.log'}", f"--config={tmp_path / 'config.cfg'}"]


def _app(tmp_path, *args:str) -> Afterburner:
    opts = AfterburnerOptions()
    opts.parse(["afterburner", *args, *_base_args(tmp_path)])
    return Afterburner(opts, parse_args=False)


def test_cmdline_options() -> None:
    opts = CmdlineOptions()
    opts.add("name", "default")
    opts.add("verbose", False)
    opts.add("count", 1)
    opts.add("words", [])
    assert opts.name == "default"
    opts.parse(["script", "some text", "more", "--verbose", "--count=5", "--words=a", "b", "--unknown"])
    assert opts.name == "default"
    assert opts.verbose is True
    assert opts.count == 5
    assert opts.words == ["a", "b"]
    assert opts.extras() == ["some text", "more", "--unknown"]
    opts.parse(["script", "--verbose=False"])
    assert opts.verbose is False
    assert opts.extras() == []
    with pytest.raises(AttributeError):
        _ = opts.no_such_option


def test_paths(tmp_path) -> None:
    opts = AfterburnerOptions()
    assert opts.rules_path().endswith("magic_rules.cson")
    assert not opts.rules_path().startswith(":/")
    assert opts.input_path() == ""
    config = tmp_path / "nested" / "dir" / "config.cfg"
    opts.parse(["script", f"--config={config}"])
    assert opts.config_path() == str(config)
    assert config.parent.is_dir()


def test_app_defaults(tmp_path) -> None:
    """ With no config file, highlighting is on with every heuristic and the word overrides. """
    app = _app(tmp_path, "queue", "SIT TIE")
    assert app.has_input()
    text = app.input_text()
    assert text == "queue\nSIT TIE"
    assert app.highlighter().annotate(text) == "qu$u$\nSIT TIE"
    assert app.classifier is app.classifier
    assert (tmp_path / "status.log").exists()


def test_app_config(tmp_path) -> None:
    (tmp_path / "config.cfg").write_text("[afterburner]\n"
                                         "magic_key_word_overrides_enabled = False\n"
                                         "suppress_skip_magic_after_space = False\n", encoding='utf-8')
    app = _app(tmp_path)
    assert app.highlighter().annotate("queue\nSIT TIE") == "qu$u#\nSIT $IE"
    # Settings changed at runtime apply to the next highlighter.
    app.settings.set(app.settings.LAYOUT, "en-us")
    assert app.highlighter().annotate("queue") == "queue"


def test_app_resources(tmp_path) -> None:
    overrides = tmp_path / "overrides.cson"
    overrides.write_text('# Custom\n{"queen": "que$n"}', encoding='utf-8')
    practice = tmp_path / "practice.txt"
    practice.write_text("queen queue\n", encoding='utf-8')
    app = _app(tmp_path, f"--overrides={overrides}", f"--input={practice}")
    assert app.input_text() == "queen queue"
    assert app.highlighter().annotate(app.input_text()) == "que$n qu$u#"
    assert "Loaded 1 word overrides" in (tmp_path / "status.log").read_text(encoding='utf-8')


def _run_main(main, monkeypatch, *args:str) -> int:
    monkeypatch.setattr(sys, "argv", ["afterburner", *args])
    return main()


def test_main_annotate(tmp_path, monkeypatch, capsys) -> None:
    assert _run_main(main_annotate.main, monkeypatch, "assassin", *_base_args(tmp_path)) == 0
    assert capsys.readouterr().out == "as#as#in\n"


def test_main_html(tmp_path, monkeypatch, capsys) -> None:
    assert _run_main(main_html.main, monkeypatch, "why", *_base_args(tmp_path)) == 0
    out = capsys.readouterr().out
    assert out.startswith('<pre class="practice">wh<span class="magic"')


def test_main_errors(tmp_path, monkeypatch, capsys) -> None:
    """ Bad resource files are logged and reported with an exit code instead of a crash. """
    rules = tmp_path / "rules.cson"
    rules.write_text('{"magic": {"a": "a"}, "skip_magic": {}}', encoding='utf-8')
    assert _run_main(main_annotate.main, monkeypatch, "queue", f"--rules={rules}", *_base_args(tmp_path)) == 1
    assert "ResourceError" in capsys.readouterr().err
    missing = tmp_path / "missing.txt"
    assert _run_main(main_html.main, monkeypatch, f"--input={missing}", *_base_args(tmp_path)) == 1


def _echo(*args) -> int:
    return len(args)


def test_entry_points(capsys) -> None:
    entry_points = {"annotate": EntryPoint(__name__, "_echo", "Count args."),
                    "analyze":  EntryPoint(__name__, "_echo", "Count args again.")}
    selector = EntryPointSelector(entry_points, default_mode="annotate")
    assert selector.load("ann")(1, 2) == 2
    assert selector.load("")() == 0
    assert selector.load("an")() == -1
    assert 'multiple matches' in capsys.readouterr().out
    assert selector.load("gui")() == -1
    assert 'No matches for operation "gui"' in capsys.readouterr().out
    assert EntryPointSelector(entry_points).load("")() == -1
