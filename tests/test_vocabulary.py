import json
import random
import tempfile
import unittest
from pathlib import Path

from vocabcross.core.constants import WordMode
from vocabcross.core.exceptions import VocabularyLoadError
from vocabcross.core.models import VocabularyEntry
from vocabcross.data.normalization import clean_term, is_eligible
from vocabcross.data.vocabulary import load_vocabulary, prepare_terms, shuffled


def letter_terms(count: int) -> list:
    return [
        {"term": f"word{chr(65 + i // 26)}{chr(65 + i % 26)}", "definition": f"definition {i}"}
        for i in range(count)
    ]


class NormalizationTests(unittest.TestCase):
    def test_clean_term_keeps_ascii_letters_uppercased(self) -> None:
        self.assertEqual(clean_term("New York!"), "NEWYORK")
        self.assertEqual(clean_term("to-do list"), "TODOLIST")
        self.assertEqual(clean_term("café"), "CAF")
        self.assertEqual(clean_term(""), "")

    def test_eligibility_uses_clean_length(self) -> None:
        self.assertFalse(is_eligible("ab"))
        self.assertFalse(is_eligible("a b"))
        self.assertTrue(is_eligible("a-b-c"))
        self.assertTrue(is_eligible("x" * 15))
        self.assertFalse(is_eligible("x" * 16))
        self.assertFalse(is_eligible("123 45"))


class ShuffleTests(unittest.TestCase):
    def test_shuffled_returns_permutation_without_mutating(self) -> None:
        items = list(range(20))
        result = shuffled(items, random.Random(3))
        self.assertEqual(items, list(range(20)))
        self.assertEqual(sorted(result), items)

    def test_seeded_shuffle_is_reproducible(self) -> None:
        self.assertEqual(shuffled("abcdefgh", random.Random(11)), shuffled("abcdefgh", random.Random(11)))

    def test_empty_and_single(self) -> None:
        self.assertEqual(shuffled([], random.Random(1)), [])
        self.assertEqual(shuffled([7]), [7])


class PrepareTermsTests(unittest.TestCase):
    def test_filters_and_derives_clean_term(self) -> None:
        vocabulary = [
            {"term": "ox", "definition": "too short"},
            {"term": "ice cream", "definition": "dessert"},
            {"term": "a" * 16, "definition": "too long"},
            VocabularyEntry("T-Rex", "dinosaur"),
        ]
        terms = prepare_terms(vocabulary, WordMode.ALL, rng=random.Random(0))
        self.assertEqual(sorted(t.clean_term for t in terms), ["ICECREAM", "TREX"])
        by_clean = {t.clean_term: t for t in terms}
        self.assertEqual(by_clean["ICECREAM"].term, "ice cream")
        self.assertEqual(by_clean["TREX"].definition, "dinosaur")

    def test_first_25_mode_truncates_after_shuffle(self) -> None:
        vocabulary = letter_terms(40)
        eligible = {entry["term"] for entry in vocabulary}
        terms = prepare_terms(vocabulary, WordMode.FIRST_25, rng=random.Random(5))
        self.assertEqual(len(terms), 25)
        self.assertEqual(len({t.term for t in terms}), 25)
        self.assertTrue({t.term for t in terms} <= eligible)

    def test_first_25_mode_is_not_positionally_biased(self) -> None:
        vocabulary = letter_terms(40)
        tail = {entry["term"] for entry in vocabulary[25:]}
        picked_from_tail = any(
            t.term in tail
            for seed in range(10)
            for t in prepare_terms(vocabulary, WordMode.FIRST_25, rng=random.Random(seed))
        )
        self.assertTrue(picked_from_tail)

    def test_all_mode_keeps_every_eligible_term(self) -> None:
        terms = prepare_terms(letter_terms(40), "all", rng=random.Random(1))
        self.assertEqual(len(terms), 40)

    def test_no_eligible_terms_yields_empty_list(self) -> None:
        vocabulary = [{"term": "12", "definition": "x"}, {"term": "a b", "definition": "y"}]
        self.assertEqual(prepare_terms(vocabulary, WordMode.ALL), [])


class LoadVocabularyTests(unittest.TestCase):
    def test_loads_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "vocab.json"
            path.write_text(
                json.dumps([{"term": "cat", "definition": "feline"}, {"term": "car"}]),
                encoding="utf-8",
            )
            entries = load_vocabulary(path)
        self.assertEqual(entries, [VocabularyEntry("cat", "feline"), VocabularyEntry("car", "")])

    def test_loads_tsv_and_csv(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tsv = Path(tmpdir) / "vocab.tsv"
            tsv.write_text("term\tdefinition\nowl\tnight bird\n", encoding="utf-8")
            csv_path = Path(tmpdir) / "vocab.csv"
            csv_path.write_text('term,definition\nfox,"sly, red animal"\n', encoding="utf-8")
            self.assertEqual(load_vocabulary(tsv), [VocabularyEntry("owl", "night bird")])
            self.assertEqual(load_vocabulary(csv_path), [VocabularyEntry("fox", "sly, red animal")])

    def test_loads_plain_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "vocab.txt"
            path.write_text("# animals\n\nbear: big mammal\nwolf\n", encoding="utf-8")
            entries = load_vocabulary(path)
        self.assertEqual(entries, [VocabularyEntry("bear", "big mammal"), VocabularyEntry("wolf", "")])

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(VocabularyLoadError):
            load_vocabulary(Path("does/not/exist.json"))

    def test_malformed_json_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "vocab.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(VocabularyLoadError):
                load_vocabulary(path)
            path.write_text(json.dumps({"term": "cat"}), encoding="utf-8")
            with self.assertRaises(VocabularyLoadError):
                load_vocabulary(path)

    def test_table_without_term_column_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "vocab.csv"
            path.write_text("word,definition\ncat,feline\n", encoding="utf-8")
            with self.assertRaises(VocabularyLoadError):
                load_vocabulary(path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
