from __future__ import annotations

import pytest

from howdoyouspell.lexicon.dialects import DialectSet, DialectTable, load_dialect_table
from howdoyouspell.lexicon.misspellings import MisspellingTable, load_misspelling_table


def test_dialect_lookup_is_bidirectional():
    table = load_dialect_table()
    expected = DialectSet(us="color", uk="colour", au="colour", nz="colour")

    assert table.lookup("color") == expected
    assert table.lookup("colour") == expected
    assert table.lookup("Colour") == expected


def test_dialect_uk_au_nz_always_agree():
    table = load_dialect_table()
    for key in table.keys():
        variants = table.lookup(key)
        assert variants.uk == variants.au == variants.nz
        assert key in (variants.us, variants.uk)


def test_dialect_missing_word_is_absent():
    assert load_dialect_table().lookup("banana") is None


def test_dialect_pair_requires_both_forms():
    with pytest.raises(ValueError):
        DialectTable.from_pairs([{"us": "color"}])


def test_misspelling_lookup_and_reverse_lookup():
    table = load_misspelling_table()

    assert table.lookup("definately") == "definitely"
    assert table.lookup("recieve") == "receive"
    assert "accomodate" in table.misspellings_for("accommodate")
    assert table.misspellings_for("banana") == []


def test_misspelling_keys_are_lowercase_and_never_self_mapped():
    table = load_misspelling_table()
    for wrong, right in table.items():
        assert wrong == wrong.lower()
        assert right == right.lower()
        assert wrong != right


def test_misspelling_conflicting_keys_rejected():
    with pytest.raises(ValueError):
        MisspellingTable.from_groups({"weather": ["wether"], "whether": ["wether"]})


def test_misspelling_groups_skip_blank_and_identity_entries():
    table = MisspellingTable.from_groups({"Seize": ["seize", " ", "Sieze"]})
    assert table.items() == [("sieze", "seize")]
