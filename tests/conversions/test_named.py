import logging
import threading

import pytest

from tinct.conversions import named as named_module
from tinct.conversions.named import lookup_named, named_color_names, normalize_name
from tinct.samples.named_colors import NAMED_COLORS
from ..samples import samples_named


def test_normalize_name():
    assert normalize_name("Red") == "red"
    assert normalize_name("r-e-d") == "red"
    assert normalize_name("Dark Slate_Gray.") == "darkslategray"
    assert normalize_name("Navajo' White") == "navajowhite"

def test_lookup_samples():
    for name, packed in samples_named.items():
        assert lookup_named(name) == packed

def test_lookup_is_case_and_punctuation_insensitive():
    assert lookup_named("Red") == lookup_named("red") == lookup_named("r-e-d") == lookup_named("R.E_D")

def test_unknown_name():
    assert lookup_named("notacolor") is None
    assert lookup_named("") is None

def test_table_covers_data_list():
    names = named_color_names()
    assert len(names) == len(NAMED_COLORS)
    assert list(names) == sorted(names)
    assert "red" in names

def test_table_is_read_only():
    table = named_module._named_table()
    with pytest.raises(TypeError):
        table["red"] = 0  # type: ignore[index]

def test_table_is_built_once_under_concurrency(monkeypatch, caplog):
    monkeypatch.setattr(named_module, "_table", None)
    caplog.set_level(logging.DEBUG, logger="tinct.conversions.named")

    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(lookup_named("red"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [0xff0000ff] * 8
    builds = [r for r in caplog.records if r.getMessage().startswith("Populated named color table")]
    assert len(builds) == 1
