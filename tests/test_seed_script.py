from __future__ import annotations

import json
import sys
from pathlib import Path

# Garante que o pacote proverbs e os scripts sejam importáveis durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
for extra in (ROOT, ROOT / "scripts"):
    if str(extra) not in sys.path:
        sys.path.insert(0, str(extra))

import seed_proverbs  # noqa: E402


def test_seed_script_initializes_and_resets(tmp_path, capsys):
    target = tmp_path / "proverbs.json"
    assert seed_proverbs.main(["--file", str(target)]) == 0
    assert "seeded with 5" in capsys.readouterr().out

    data = json.loads(target.read_text(encoding="utf-8"))
    data.append(dict(data[0], id=6))
    target.write_text(json.dumps(data), encoding="utf-8")

    assert seed_proverbs.main(["--file", str(target)]) == 0
    assert "already has 6" in capsys.readouterr().out

    assert seed_proverbs.main(["--file", str(target), "--reset"]) == 0
    assert [p["id"] for p in json.loads(target.read_text(encoding="utf-8"))] == [1, 2, 3, 4, 5]
