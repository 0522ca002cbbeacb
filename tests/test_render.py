import unittest

from parsing.document import parse_html
from parsing.errors import HtmlUtilError, SerializationError
from parsing.render import node_to_string


class TestNodeToString(unittest.TestCase):
    def test_element(self) -> None:
        soup = parse_html('<div><p id="a">x</p></div>')
        self.assertEqual(node_to_string(soup.p), '<p id="a">x</p>')

    def test_document(self) -> None:
        soup = parse_html("<p>x</p><br/>")
        self.assertEqual(node_to_string(soup), "<p>x</p><br/>")

    def test_text_is_escaped(self) -> None:
        soup = parse_html("<p>a &lt; b</p>")
        self.assertEqual(node_to_string(soup.p), "<p>a &lt; b</p>")
        self.assertEqual(node_to_string(soup.p.contents[0]), "a &lt; b")

    def test_comment(self) -> None:
        soup = parse_html("<p><!--note--></p>")
        self.assertEqual(node_to_string(soup.p.contents[0]), "<!--note-->")

    def test_html_formatter_uses_named_entities(self) -> None:
        soup = parse_html("<p>café</p>")
        self.assertEqual(node_to_string(soup.p, formatter="html"), "<p>caf&eacute;</p>")

    def test_pretty_output_is_indented(self) -> None:
        soup = parse_html("<div><p>x</p></div>")
        rendered = node_to_string(soup.div, pretty=True)
        self.assertIn("\n", rendered)
        self.assertTrue(rendered.startswith("<div>\n"))

    def test_unknown_formatter_raises(self) -> None:
        soup = parse_html("<p>x</p>")
        with self.assertRaises(SerializationError) as ctx:
            node_to_string(soup.p, formatter="no-such-formatter")
        self.assertIsInstance(ctx.exception.__cause__, KeyError)
        self.assertIsInstance(ctx.exception, HtmlUtilError)

    def test_non_node_raises(self) -> None:
        with self.assertRaises(SerializationError):
            node_to_string(object())
