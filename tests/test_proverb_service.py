from __future__ import annotations

import random
import sys
import threading
from pathlib import Path

import pytest

# Garante que o pacote proverbs seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from proverbs.domain.records import ProverbDraft, ProverbRecord  # noqa: E402
from proverbs.repositories.json_storage import ProverbStore, StoreWriteError  # noqa: E402
from proverbs.services import proverb_service  # noqa: E402
from proverbs.services.proverb_service import ProverbService  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    return ProverbStore(tmp_path / "proverbs.json")


@pytest.fixture()
def svc(store):
    return ProverbService(store, rng=random.Random(1234))


def _draft(**overrides) -> ProverbDraft:
    values = {
        "text_dari": "صبر تلخ است",
        "text_pashto": "صبر تریخ دی",
        "translation_en": "Patience is bitter",
        "meaning": "but its fruit is sweet",
        "category": "patience",
    }
    values.update(overrides)
    return ProverbDraft(**values)


def _seed_ids(store: ProverbStore, ids) -> None:
    store.write_all([_draft(translation_en=f"Proverb {i}").to_record(i) for i in ids])


def test_create_on_empty_store_assigns_id_1(svc, store):
    record, reason = svc.create_proverb(_draft())
    assert reason is None
    assert record.id == 1
    assert store.read_all() == [record]


def test_create_uses_max_plus_one_not_gaps(svc, store):
    _seed_ids(store, [1, 3, 5])
    record, reason = svc.create_proverb(_draft())
    assert reason is None
    assert record.id == 6
    assert [r.id for r in store.read_all()] == [1, 3, 5, 6]


def test_many_creates_yield_distinct_ids(svc, store):
    for i in range(10):
        svc.create_proverb(_draft(translation_en=f"Proverb {i}"))
    ids = [r.id for r in store.read_all()]
    assert ids == list(range(1, 11))


def test_concurrent_creates_do_not_lose_updates(svc, store):
    def worker(n):
        for i in range(5):
            svc.create_proverb(_draft(translation_en=f"w{n}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r.id for r in store.read_all()]
    assert len(ids) == 40
    assert sorted(ids) == list(range(1, 41))


def test_create_with_missing_field_is_rejected(svc, store):
    _seed_ids(store, [1])
    before = store.path.read_bytes()
    draft = _draft(text_pashto="", category="   ")
    missing, reason = svc.create_proverb(draft)
    assert reason == proverb_service.INVALID
    assert missing == ["textPashto", "category"]
    assert store.path.read_bytes() == before
    # valores enviados continuam intactos
    assert draft.category == "   "
    assert draft.translation_en == "Patience is bitter"


def test_meaning_is_optional(svc):
    record, reason = svc.create_proverb(_draft(meaning=""))
    assert reason is None
    assert record.meaning == ""


def test_free_form_category_is_accepted(svc):
    record, reason = svc.create_proverb(_draft(category="weather"))
    assert reason is None
    assert record.category == "weather"


def test_get_proverb(svc, store):
    _seed_ids(store, [1, 2])
    record, reason = svc.get_proverb(2)
    assert reason is None
    assert record.translation_en == "Proverb 2"


@pytest.mark.parametrize("missing_id", [99, None])
def test_missing_id_never_mutates(svc, store, missing_id):
    _seed_ids(store, [1, 2, 3])
    before = store.path.read_bytes()

    assert svc.get_proverb(missing_id) == (None, proverb_service.NOT_FOUND)
    assert svc.update_proverb(missing_id, _draft()) == (None, proverb_service.NOT_FOUND)
    assert svc.delete_proverb(missing_id) == (None, proverb_service.NOT_FOUND)
    assert store.path.read_bytes() == before


def test_update_replaces_everything_but_id(svc, store):
    _seed_ids(store, [1, 2, 3])
    updated, reason = svc.update_proverb(2, _draft(translation_en="Changed", category="life", meaning=""))
    assert reason is None
    assert updated == ProverbRecord(
        id=2,
        text_dari="صبر تلخ است",
        text_pashto="صبر تریخ دی",
        translation_en="Changed",
        meaning="",
        category="life",
    )
    records = store.read_all()
    assert [r.id for r in records] == [1, 2, 3]
    assert records[1] == updated


def test_delete_removes_only_target(svc, store):
    _seed_ids(store, [1, 2, 3])
    removed, reason = svc.delete_proverb(2)
    assert reason is None
    assert removed.id == 2
    assert [r.id for r in store.read_all()] == [1, 3]


def test_random_pick_hits_every_record(svc, store):
    store.initialize()
    seen = set()
    for _ in range(200):
        record, reason = svc.random_proverb()
        assert reason is None
        seen.add(record.id)
    assert seen == {1, 2, 3, 4, 5}


def test_random_pick_on_empty_store(svc):
    assert svc.random_proverb() == (None, proverb_service.EMPTY)


def test_read_failures_are_reported(svc, store):
    store.path.write_text("[{broken", encoding="utf-8")
    assert svc.list_proverbs() == ([], proverb_service.READ_FAILED)
    assert svc.get_proverb(1) == (None, proverb_service.READ_FAILED)
    assert svc.create_proverb(_draft()) == (None, proverb_service.READ_FAILED)
    assert svc.update_proverb(1, _draft()) == (None, proverb_service.READ_FAILED)
    assert svc.delete_proverb(1) == (None, proverb_service.READ_FAILED)
    assert svc.random_proverb() == (None, proverb_service.READ_FAILED)


def test_write_failures_are_reported(svc, store, monkeypatch):
    _seed_ids(store, [1, 2])

    def boom(records):
        raise StoreWriteError("disk full")

    monkeypatch.setattr(store, "write_all", boom)
    assert svc.create_proverb(_draft()) == (None, proverb_service.WRITE_FAILED)
    assert svc.update_proverb(1, _draft()) == (None, proverb_service.WRITE_FAILED)
    assert svc.delete_proverb(1) == (None, proverb_service.WRITE_FAILED)
    monkeypatch.undo()
    assert [r.id for r in store.read_all()] == [1, 2]
