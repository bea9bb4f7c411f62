from pathlib import Path

import pytest

SAMPLE_CORPUS = """\
^data
^id ex1 _id
^ct_type="bridging" Asked what she said. _ct
^aj _aj
^tx Ni say. _tx
^mb n-say _mb
^gl 1SG say _gl
^tr I say. _tr
^lt I say _lt
_data
^data
^id ex2 _id
^ct Repeated later. _ct
^mb n-say _mb
^gl 1SG  say _gl
^tr I say. _tr
_data
^data
^rf ex3 _rf
^ct_type="out-of-the-blue" Said spontaneously. _ct
^aj ? _aj
^mb a-say _mb
^gl 3SG say _gl
^tr She says. _tr
_data
^data
^id ex4 _id
^mb n-say-ed _mb
^gl 1SG say PST _gl
^tr I said. _tr
_data
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_CORPUS


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "corpus.wriml"
    path.write_text(SAMPLE_CORPUS, encoding="utf-8")
    return path
