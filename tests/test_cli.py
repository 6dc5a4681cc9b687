import sys
from pathlib import Path

import pytest
from apps.cli import play, replay


@pytest.mark.parametrize("app,extra", [
    (play, []),
    (replay, ["--guesses", "round1.txt"]),
])
@pytest.mark.parametrize("oracle_args", [
    ["--oracle", "nope"],
    ["--oracle", "wordlist"],
    ["--oracle", "wordlist", "--dictionary", "__missing__/words"],
])
def test_bad_oracle_options_exit_cleanly(monkeypatch, tmp_path: Path, app, extra, oracle_args):
    args = [a.replace("__missing__", str(tmp_path)) for a in oracle_args]
    monkeypatch.setattr(sys, "argv", [app.__name__] + extra + args)
    with pytest.raises(SystemExit) as exc:
        app.main()
    assert exc.value.code == 2
