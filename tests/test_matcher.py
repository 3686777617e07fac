import unittest
from modal_oracle.codec import InvalidDegreeError
from modal_oracle.constants import CONFLICTING, NO_MATCH, NO_NOTES
from modal_oracle.matcher import (
    analyze_single_mode,
    best_greek_template,
    classify_label,
    describe_match,
)
from modal_oracle.templates import MODES_BY_NAME


class TestExactModes(unittest.TestCase):
    def test_ionian(self):
        self.assertEqual(analyze_single_mode(["1", "2", "3", "4", "5", "6", "7"]), "Ionian")

    def test_dorian(self):
        self.assertEqual(analyze_single_mode(["1", "2", "3b", "4", "5", "6", "7b"]), "Dorian")

    def test_order_does_not_matter(self):
        self.assertEqual(analyze_single_mode(["7b", "1", "6b", "5", "4", "3b", "2"]), "Aeolian")

    def test_locrian_either_tritone_spelling(self):
        self.assertEqual(
            analyze_single_mode(["1", "2b", "3b", "4", "5b", "6b", "7b"]), "Locrian")
        self.assertEqual(
            analyze_single_mode(["1", "2b", "3b", "4", "4#", "6b", "7b"]), "Locrian")


class TestPartialModes(unittest.TestCase):
    def test_major_triad(self):
        self.assertEqual(analyze_single_mode(["1", "3", "5"]), "Ionian no2 no4 no6 no7")

    def test_minor_triad_ties_to_dorian(self):
        self.assertEqual(analyze_single_mode(["1", "3b", "5"]), "Dorian no2 no4 no6 no7b")

    def test_essentials_decide(self):
        self.assertEqual(analyze_single_mode(["1", "3", "5", "6", "7b"]), "Mixolydian no2 no4")
        self.assertEqual(analyze_single_mode(["1", "3", "4#", "5", "7"]), "Lydian no2 no6")
        self.assertEqual(analyze_single_mode(["1", "2b", "3b", "5"]), "Phrygian no4 no6b no7b")

    def test_phrygian_anchored_on_flat_two(self):
        self.assertEqual(analyze_single_mode(["1", "2b", "4", "5"]), "Phrygian no3b no6b no7b")
        self.assertEqual(analyze_single_mode(["1", "2b"]), "Phrygian no3b no4 no5 no6b no7b")

    def test_only_listed_alterations_are_named(self):
        self.assertEqual(analyze_single_mode(["1", "2b", "3", "4"]), "Ionian no2 no5 no6 no7")

    def test_alteration_suffix(self):
        self.assertEqual(analyze_single_mode(["1", "3", "5", "6b", "7"]), "Ionian 5# no2 no4 no6")

    def test_altered_step_suppresses_omission(self):
        self.assertEqual(analyze_single_mode(["1", "2", "3b", "4", "5", "6", "7"]), "Dorian 7")

    def test_tritone_displayed_as_flat_five_next_to_fourth(self):
        self.assertEqual(
            analyze_single_mode(["1", "2", "3", "4", "4#", "5", "6", "7"]), "Ionian 5b")


class TestSpecialPatterns(unittest.TestCase):
    def test_blues(self):
        self.assertEqual(analyze_single_mode(["1", "3b", "3", "4", "5", "7b"]), "Blues scale")
        self.assertEqual(analyze_single_mode(["1", "3b", "3", "5", "7b"]), "Blues scale no4")

    def test_octatonic(self):
        self.assertEqual(
            analyze_single_mode(["1", "2b", "3b", "3", "4#", "5", "6", "7b"]), "Octatonic scale")

    def test_mode_plus_natural(self):
        self.assertEqual(
            analyze_single_mode(["1", "2", "3b", "4", "5", "6b", "6", "7b"]), "Aeolian 6")

    def test_ionian_sharp_two(self):
        self.assertEqual(
            analyze_single_mode(["1", "2", "3b", "3", "4", "5", "6", "7"]), "Ionian 2#")
        self.assertEqual(
            analyze_single_mode(["1", "2", "3b", "3", "4", "6", "7"]), "Ionian 2# no5")


class TestIntervalTemplates(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(analyze_single_mode(["1", "4"]), "Sus4")
        self.assertEqual(analyze_single_mode(["1", "2"]), "Sus2")
        self.assertEqual(analyze_single_mode(["1", "7"]), "Major 7")

    def test_alteration_appended_to_complete_template(self):
        self.assertEqual(analyze_single_mode(["1", "4", "4#"]), "Sus4 4#")

    def test_alteration_does_not_replace_essential(self):
        self.assertEqual(analyze_single_mode(["1", "4#"]), NO_MATCH)
        self.assertEqual(analyze_single_mode(["1", "7b"]), NO_MATCH)
        self.assertNotIn("Sus2", analyze_single_mode(["1", "2b"]))

    def test_requires_tonic(self):
        self.assertEqual(analyze_single_mode(["2", "4"]), NO_MATCH)


class TestOutcomes(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(analyze_single_mode([]), NO_NOTES)
        self.assertEqual(analyze_single_mode(None), NO_NOTES)

    def test_conflict(self):
        self.assertEqual(analyze_single_mode(["1", "3", "3b", "5"]), CONFLICTING)
        self.assertIn(NO_MATCH, analyze_single_mode(["1", "3", "3b", "5"]))

    def test_no_match(self):
        self.assertEqual(analyze_single_mode(["1", "5"]), NO_MATCH)
        self.assertEqual(analyze_single_mode(["1", "2", "4", "5"]), NO_MATCH)

    def test_invalid_token_raises(self):
        with self.assertRaises(InvalidDegreeError):
            analyze_single_mode(["1", "9"])

    def test_debug_log_names_template(self):
        with self.assertLogs("modal_oracle.matcher", level="DEBUG") as cm:
            analyze_single_mode(["1", "3", "5"])
        self.assertIn("Ionian", cm.output[0])


class TestHelpers(unittest.TestCase):
    def test_best_greek_template_needs_an_anchor(self):
        self.assertEqual(best_greek_template(frozenset({0, 7})), (None, 0.0))

    def test_best_greek_template_score(self):
        template, score = best_greek_template(frozenset({0, 3, 8}))
        self.assertEqual(template.name, "Aeolian")
        self.assertEqual(score, 6.0)

    def test_describe_match(self):
        self.assertEqual(describe_match(MODES_BY_NAME["Lydian"], frozenset({0, 4, 6, 7})),
                         "Lydian no2 no6 no7")

    def test_classify_label(self):
        self.assertEqual(classify_label("Ionian no2"), "greek")
        self.assertEqual(classify_label("Sus4 4#"), "interval")
        self.assertEqual(classify_label("Blues scale"), "pattern")
        self.assertEqual(classify_label(NO_NOTES), "none")
        self.assertEqual(classify_label("Custom Scale"), "none")
        self.assertEqual(classify_label("Conflict: Cannot select both 3 and 3b"), "none")


if __name__ == "__main__":
    unittest.main()
