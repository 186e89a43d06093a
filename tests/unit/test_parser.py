import json
import unittest

from organize_ai.errors import ParseError
from organize_ai.llm.parser import (
    DEFAULT_REASONING,
    RECOVERED_REASONING,
    clamp_confidence,
    parse_response,
    try_recover_partial,
)


def suggestion(name, folder="Docs", confidence=0.9, **extra):
    item = {
        "fileName": name,
        "suggestedPath": f"{folder}/{name}",
        "reason": f"{name} belongs in {folder}",
        "confidence": confidence,
        "category": folder.lower(),
    }
    item.update(extra)
    return item


class TestParseResponse(unittest.TestCase):
    def test_confidence_is_clamped(self):
        items = [
            suggestion("a.txt", confidence=-0.5),
            suggestion("b.txt", confidence=1.7),
            suggestion("c.txt", confidence=0.0),
            {"fileName": "d.txt", "suggestedPath": "Docs/d.txt", "reason": "r"},
            suggestion("e.txt", confidence="high"),
        ]
        text = json.dumps({"suggestions": items, "reasoning": "By type"})

        response = parse_response(text)

        self.assertEqual(len(response.suggestions), 5)
        self.assertEqual(
            [s.confidence for s in response.suggestions],
            [0.0, 1.0, 0.0, 0.5, 0.5],
        )
        self.assertEqual(response.reasoning, "By type")

    def test_fields_are_copied_and_file_left_unresolved(self):
        item = suggestion("a.txt", metadata={"year": 2024})
        response = parse_response(json.dumps({"suggestions": [item]}))

        s = response.suggestions[0]
        self.assertIsNone(s.file)
        self.assertEqual(s.suggested_path, "Docs/a.txt")
        self.assertEqual(s.reason, "a.txt belongs in Docs")
        self.assertEqual(s.category, "docs")
        self.assertEqual(s.metadata, {"year": 2024})
        self.assertEqual(response.reasoning, DEFAULT_REASONING)
        self.assertIsNone(response.clarification_needed)

    def test_surrounding_prose_and_code_fence(self):
        body = json.dumps({"suggestions": [suggestion("a.txt")], "reasoning": "Fenced"})
        text = f"Here is the plan:\n```json\n{body}\n```\n"

        response = parse_response(text)

        self.assertEqual(len(response.suggestions), 1)
        self.assertEqual(response.reasoning, "Fenced")

    def test_clarification_is_passed_through(self):
        text = json.dumps({
            "suggestions": [],
            "reasoning": "Unsure",
            "clarificationNeeded": {"questions": ["By year or by show?"], "reason": "Two valid layouts"},
        })

        response = parse_response(text)

        self.assertEqual(response.clarification_needed.questions, ["By year or by show?"])
        self.assertEqual(response.clarification_needed.reason, "Two valid layouts")

    def test_truncated_reply_recovers_complete_suggestions(self):
        first = json.dumps(suggestion("a.txt"))
        second = json.dumps(suggestion("b.txt", confidence=3))
        text = '{"suggestions": [' + first + ", " + second + ', {"fileName": "c.txt", "suggestedPath": "Do'

        response = parse_response(text)

        self.assertEqual(len(response.suggestions), 2)
        self.assertEqual(response.reasoning, RECOVERED_REASONING)
        self.assertEqual(response.suggestions[0].suggested_path, "Docs/a.txt")
        self.assertEqual(response.suggestions[1].confidence, 1.0)
        self.assertTrue(all(s.file is None for s in response.suggestions))

    def test_truncated_reply_keeps_nested_metadata(self):
        first = json.dumps(suggestion("a.txt", metadata={"year": 2024}))
        second = json.dumps(suggestion("b.txt", metadata={"tags": {"kind": "notes"}}))
        text = '{"suggestions": [' + first + ", " + second + ', {"fileName": "c.txt", "metadata": {"ye'

        response = parse_response(text)

        self.assertEqual(len(response.suggestions), 2)
        self.assertEqual(response.reasoning, RECOVERED_REASONING)
        self.assertEqual(response.suggestions[0].metadata, {"year": 2024})
        self.assertEqual(response.suggestions[1].metadata, {"tags": {"kind": "notes"}})

    def test_truncated_reply_with_braces_inside_strings(self):
        first = json.dumps(suggestion("a.mkv", folder="TV/Show"))
        second = json.dumps(suggestion("b.mkv", folder="TV/Show", reason="Uses {Show}/{Season} layout"))
        text = '{"suggestions": [' + first + ", " + second + ', {"fileName": "c.mkv", "sugg'

        response = parse_response(text)

        self.assertEqual(
            [s.suggested_path for s in response.suggestions],
            ["TV/Show/a.mkv", "TV/Show/b.mkv"],
        )
        self.assertEqual(response.suggestions[1].reason, "Uses {Show}/{Season} layout")

    def test_truncated_reply_ending_after_complete_object(self):
        first = json.dumps(suggestion("a.txt"))
        text = '{"suggestions": [' + first + ","

        response = parse_response(text)

        self.assertEqual(len(response.suggestions), 1)
        self.assertEqual(response.reasoning, RECOVERED_REASONING)

    def test_truncated_reply_with_nothing_recoverable(self):
        with self.assertRaises(ParseError):
            parse_response('{"suggestions": [{"fileName": "a.t')

    def test_no_json_raises(self):
        with self.assertRaises(ParseError):
            parse_response("I'm sorry, I can't help with organizing these files.")

    def test_missing_suggestions_raises(self):
        with self.assertRaises(ParseError):
            parse_response('{"reasoning": "nothing to do"}')

    def test_suggestions_must_be_a_list(self):
        with self.assertRaises(ParseError):
            parse_response('{"suggestions": {"fileName": "a.txt"}}')

    def test_invalid_json_raises_with_excerpt(self):
        text = "{" + "x" * 2000 + "}"
        with self.assertRaises(ParseError) as ctx:
            parse_response(text)
        self.assertEqual(len(ctx.exception.excerpt), 500)
        self.assertTrue(ctx.exception.excerpt.startswith("{xxx"))


class TestRecoverPartial(unittest.TestCase):
    def test_malformed_matches_are_skipped(self):
        text = (
            '{"suggestions": ['
            '{"fileName": "a.txt", "suggestedPath": "x/a.txt"}, '
            '{"fileName": "b.txt", oops}, '
            '{"fileName": "c.txt", "suggestedPath": "x/c.txt"}, '
            '{"fileName": "d'
        )

        recovered = try_recover_partial(text)

        self.assertEqual([r["fileName"] for r in recovered], ["a.txt", "c.txt"])

    def test_nothing_to_recover(self):
        self.assertEqual(try_recover_partial('{"reasoning": "cut off'), [])


class TestClampConfidence(unittest.TestCase):
    def test_values(self):
        self.assertEqual(clamp_confidence(0.42), 0.42)
        self.assertEqual(clamp_confidence("0.8"), 0.8)
        self.assertEqual(clamp_confidence(None), 0.5)
        self.assertEqual(clamp_confidence(True), 0.5)
        self.assertEqual(clamp_confidence(float("nan")), 0.5)
        self.assertEqual(clamp_confidence(-2), 0.0)


if __name__ == "__main__":
    unittest.main()
