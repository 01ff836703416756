"""Tests for the rich-text renderer."""

import unittest

from pycontentful.exceptions import (
    MalformedNodeError,
    RenderError,
    UnknownMarkError,
    UnknownNodeTypeError,
)
from pycontentful.rendering import (
    ContentRenderer,
    Mark,
    RenderConfig,
    parse_nodes,
    render,
    render_document,
    render_page,
    render_text,
)
from pycontentful.rendering.renderer import BLOCK_TAGS


def text(value, *marks):
    return {
        "nodeType": "text",
        "value": value,
        "marks": [{"type": m} for m in marks],
        "data": {},
    }


def node(node_type, *children, **extra):
    out = {"nodeType": node_type, "content": list(children), "data": {}}
    out.update(extra)
    return out


class TestRenderContainers(unittest.TestCase):
    def test_empty_input(self):
        self.assertEqual(render([]), "")
        self.assertEqual(render(()), "")

    def test_every_container_type_wraps_children(self):
        children = [text("x", "bold"), text("y")]
        inner = render(children)
        self.assertEqual(inner, "<strong>x</strong>y")
        for node_type, tag in BLOCK_TAGS.items():
            with self.subTest(node_type=node_type):
                self.assertEqual(
                    render([node(node_type, *children)]),
                    f"<{tag}>{inner}</{tag}>",
                )

    def test_headings(self):
        for level in range(1, 7):
            self.assertEqual(
                render([node(f"heading-{level}", text("T"))]),
                f"<h{level}>T</h{level}>",
            )

    def test_empty_container(self):
        self.assertEqual(render([node("paragraph")]), "<p></p>")

    def test_siblings_concatenate_in_order(self):
        nodes = [
            node("paragraph", text("Hello, world!")),
            node("heading-1", text("Welcome")),
        ]
        self.assertEqual(render(nodes), "<p>Hello, world!</p><h1>Welcome</h1>")

    def test_nested_bold_paragraph(self):
        nodes = [node("paragraph", text("Hello, world!", "bold"))]
        self.assertEqual(render(nodes), "<p><strong>Hello, world!</strong></p>")

    def test_unordered_list(self):
        nodes = [
            node(
                "unordered-list",
                node("list-item", text("A")),
                node("list-item", text("B")),
            )
        ]
        self.assertEqual(render(nodes), "<ul><li>A</li><li>B</li></ul>")

    def test_table(self):
        nodes = [
            node(
                "table",
                node(
                    "table-row",
                    node("table-header-cell", node("paragraph", text("H"))),
                ),
                node("table-row", node("table-cell", node("paragraph", text("C")))),
            )
        ]
        self.assertEqual(
            render(nodes),
            "<table><tr><th><p>H</p></th></tr><tr><td><p>C</p></td></tr></table>",
        )

    def test_text_is_not_escaped(self):
        self.assertEqual(render([text("<b>&</b>")]), "<b>&</b>")

    def test_deep_nesting(self):
        tree = text("deep")
        for _ in range(50):
            tree = node("list-item", tree)
        self.assertEqual(render([tree]), "<li>" * 50 + "deep" + "</li>" * 50)

    def test_too_deep_nesting_is_a_depth_error(self):
        tree = text("deep")
        for _ in range(2000):
            tree = node("paragraph", tree)
        with self.assertRaises(RenderError) as ctx:
            render([tree])
        self.assertNotIsInstance(ctx.exception, MalformedNodeError)
        self.assertIn("nested too deeply", str(ctx.exception))

    def test_options_must_be_render_config(self):
        with self.assertRaises(TypeError) as ctx:
            render([text("a")], {"unknown_nodes": "skip"})
        self.assertIn("RenderConfig", str(ctx.exception))
        with self.assertRaises(TypeError):
            ContentRenderer({"unknown_nodes": "skip"})

    def test_input_is_not_mutated(self):
        nodes = [node("paragraph", text("a", "italic"))]
        before = repr(nodes)
        render(nodes)
        self.assertEqual(repr(nodes), before)

    def test_accepts_parsed_nodes(self):
        parsed = parse_nodes([node("paragraph", text("a"))])
        self.assertEqual(render(parsed), "<p>a</p>")


class TestRenderLeaves(unittest.TestCase):
    def test_hr(self):
        self.assertEqual(render([{"nodeType": "hr"}]), "<hr />")

    def test_hr_ignores_extra_fields(self):
        hr = {"nodeType": "hr", "content": [text("ignored")], "value": "x", "data": {}}
        self.assertEqual(render([hr]), "<hr />")

    def test_text_without_marks_key(self):
        self.assertEqual(render([{"nodeType": "text", "value": "plain"}]), "plain")

    def test_hyperlink(self):
        link = {
            "nodeType": "hyperlink",
            "data": {"uri": "https://x"},
            "content": [{"nodeType": "text", "value": "go", "marks": []}],
        }
        self.assertEqual(render([link]), '<a href="https://x">go</a>')

    def test_hyperlink_uri_is_literal(self):
        link = node("hyperlink", text("q"), data={"uri": "/a?b=1&c=\"2\""})
        self.assertEqual(render([link]), '<a href="/a?b=1&c="2"">q</a>')

    def test_hyperlink_inside_paragraph(self):
        nodes = [
            node(
                "paragraph",
                text("see "),
                node("hyperlink", text("docs", "bold"), data={"uri": "/docs"}),
            )
        ]
        self.assertEqual(
            render(nodes), '<p>see <a href="/docs"><strong>docs</strong></a></p>'
        )


class TestMarks(unittest.TestCase):
    def test_fold_order(self):
        bold, italic = {"type": "bold"}, {"type": "italic"}
        self.assertEqual(render_text("hi", [bold, italic]), "<em><strong>hi</strong></em>")
        self.assertEqual(render_text("hi", [italic, bold]), "<strong><em>hi</em></strong>")

    def test_mark_forms(self):
        self.assertEqual(render_text("hi", ["bold"]), "<strong>hi</strong>")
        self.assertEqual(render_text("hi", [Mark(type="italic")]), "<em>hi</em>")
        self.assertEqual(render_text("hi"), "hi")

    def test_repeated_mark(self):
        self.assertEqual(
            render_text("hi", ["bold", "bold"]), "<strong><strong>hi</strong></strong>"
        )

    def test_unknown_mark_raises(self):
        with self.assertRaises(UnknownMarkError) as ctx:
            render_text("hi", ["underline"])
        self.assertEqual(ctx.exception.mark_type, "underline")

    def test_unknown_mark_aborts_whole_render(self):
        nodes = [
            node("paragraph", text("fine")),
            node("paragraph", text("bad", "bold", "code")),
        ]
        with self.assertRaises(UnknownMarkError):
            render(nodes)

    def test_mark_without_type(self):
        with self.assertRaises(UnknownMarkError) as ctx:
            render_text("hi", [{}])
        self.assertIsNone(ctx.exception.mark_type)


class TestUnknownNodes(unittest.TestCase):
    def setUp(self):
        self.nodes = [
            node(
                "blockquote",
                node("paragraph", text("quoted")),
            ),
            node("embedded-entry-block", data={"target": {"sys": {"id": "x"}}}),
        ]

    def test_passthrough_is_default(self):
        self.assertEqual(render(self.nodes), "<p>quoted</p>")

    def test_skip(self):
        self.assertEqual(render(self.nodes, RenderConfig(unknown_nodes="skip")), "")

    def test_error(self):
        with self.assertRaises(UnknownNodeTypeError) as ctx:
            render(self.nodes, RenderConfig(unknown_nodes="error"))
        self.assertEqual(ctx.exception.node_type, "blockquote")

    def test_unknown_without_content(self):
        self.assertEqual(render([{"nodeType": "mystery"}]), "")

    def test_invalid_policy(self):
        with self.assertRaises(ValueError):
            RenderConfig(unknown_nodes="explode")


class TestMalformedNodes(unittest.TestCase):
    def assertMalformed(self, nodes):
        with self.assertRaises(MalformedNodeError) as ctx:
            render(nodes)
        self.assertIsInstance(ctx.exception, RenderError)
        return ctx.exception

    def test_text_missing_value(self):
        err = self.assertMalformed([{"nodeType": "text", "marks": []}])
        self.assertTrue(err.errors)

    def test_hyperlink_missing_uri(self):
        self.assertMalformed([node("hyperlink", text("x"))])

    def test_hyperlink_missing_content(self):
        self.assertMalformed([{"nodeType": "hyperlink", "data": {"uri": "/x"}}])

    def test_container_missing_content(self):
        self.assertMalformed([{"nodeType": "paragraph", "data": {}}])

    def test_missing_node_type(self):
        self.assertMalformed([{"content": []}])

    def test_non_object_node(self):
        self.assertMalformed(["just a string"])

    def test_nested_shape_error(self):
        self.assertMalformed([node("paragraph", {"nodeType": "text"})])

    def test_not_a_list(self):
        self.assertMalformed({"nodeType": "paragraph", "content": []})


class TestHooks(unittest.TestCase):
    def test_hook_replaces_builtin(self):
        def quote(n, render_children):
            return f"<blockquote>{render_children()}</blockquote>"

        config = RenderConfig(node_renderers={"blockquote": quote})
        nodes = [node("blockquote", node("paragraph", text("q", "italic")))]
        self.assertEqual(
            render(nodes, config), "<blockquote><p><em>q</em></p></blockquote>"
        )

    def test_config_threaded_into_children(self):
        seen = []

        def para(n, render_children):
            seen.append(n.nodeType)
            return f"<p class='x'>{render_children()}</p>"

        config = RenderConfig(node_renderers={"paragraph": para})
        nodes = [node("unordered-list", node("list-item", node("paragraph", text("a"))))]
        self.assertEqual(render(nodes, config), "<ul><li><p class='x'>a</p></li></ul>")
        self.assertEqual(seen, ["paragraph"])

    def test_hook_sees_node_fields(self):
        def entry(n, render_children):
            return f"[{n.data['target']['sys']['id']}]"

        config = RenderConfig(node_renderers={"embedded-entry-block": entry})
        nodes = [node("embedded-entry-block", data={"target": {"sys": {"id": "e1"}}})]
        self.assertEqual(render(nodes, config), "[e1]")

    def test_node_renderers_are_frozen(self):
        hooks = {}
        config = RenderConfig(node_renderers=hooks)
        hooks["paragraph"] = lambda n, r: "changed"
        self.assertEqual(render([node("paragraph", text("a"))], config), "<p>a</p>")


class TestDocumentAndPage(unittest.TestCase):
    def test_render_document(self):
        document = {
            "nodeType": "document",
            "data": {},
            "content": [node("paragraph", text("Hi")), {"nodeType": "hr", "data": {}}],
        }
        self.assertEqual(render_document(document), "<p>Hi</p><hr />")

    def test_render_document_accepts_list(self):
        self.assertEqual(render_document([node("paragraph", text("Hi"))]), "<p>Hi</p>")

    def test_render_document_without_content(self):
        with self.assertRaises(MalformedNodeError):
            render_document({"nodeType": "document"})

    def test_render_page(self):
        page = render_page("Tom & Jerry", "<p>Hi</p>")
        self.assertIn("<p>Hi</p>", page)
        self.assertIn("Tom &amp; Jerry", page)
        self.assertIn('class="rich-text"', page)
        self.assertTrue(page.lower().startswith("<!doctype html>"))

    def test_content_renderer(self):
        renderer = ContentRenderer(RenderConfig(unknown_nodes="skip"))
        self.assertEqual(renderer.render([{"nodeType": "x", "content": [text("a")]}]), "")
        self.assertEqual(
            renderer.render_document({"nodeType": "document", "content": [text("a")]}),
            "a",
        )
        self.assertIn("<p>a</p>", renderer.render_full_page("t", "<p>a</p>"))


if __name__ == "__main__":
    unittest.main()
