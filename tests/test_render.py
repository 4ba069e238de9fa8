"""Tests export HTML/CSS : feuille de style scopée, balisage, mode code."""
from widget_builder.core.schemas import Block, PageDocument
from widget_builder.migration import load_block, load_page
from widget_builder.renderer import (
    HtmlRenderer, block_css, generate_page_css, render_block, render_document, render_visual,
)
from widget_builder.renderer.base import Renderer


def _heading(block_id="h1", **content):
    return load_block({"id": block_id, "type": "heading", "content": {"text": "Hello", "style": {}, **content}})


# ── Feuille de style ─────────────────────────────────────────────────────────

class TestBlockCss:
    def test_base_rule(self):
        css = block_css(_heading())
        assert css.startswith(".widget-h1 { ")
        assert "font-size: 36px" in css

    def test_only_differing_overrides(self):
        block = _heading(style={"typography": {"fontSize": {"desktop": 48, "mobile": 28}}})
        css = block_css(block)
        assert "@media (max-width: 767px) { .widget-h1 { font-size: 28px; } }" in css
        assert "(min-width: 768px)" not in css

    def test_hidden_breakpoint_media_query(self):
        block = _heading(advanced={"responsive": {"hideOnTablet": True}})
        css = block_css(block)
        assert "@media (min-width: 768px) and (max-width: 1023px) { .widget-h1 { display: none; } }" in css
        assert "(max-width: 767px)" not in css

    def test_hidden_on_desktop_reverted_elsewhere(self):
        block = _heading(advanced={"responsive": {"hideOnDesktop": True}})
        css = block_css(block)
        assert ".widget-h1 { text-align: left;" in css
        assert "display: revert" in css

    def test_button_hover_rule(self):
        block = load_block({"id": "b1", "type": "button", "content": {"text": "Go", "link": {}}})
        css = block_css(block)
        assert ".widget-b1:hover { color: var(--hover-color);" in css

    def test_custom_css_last(self):
        block = _heading(advanced={"customCSS": "selector:hover { opacity: 0.5; }"})
        css = block_css(block)
        assert css.endswith(".widget-h1:hover { opacity: 0.5; }")

    def test_code_mode_has_no_rules(self):
        block = load_block({"id": "c1", "type": "heading", "mode": "code", "htmlContent": "<p>x</p>"})
        assert block_css(block) == ""

    def test_page_css_in_document_order(self):
        blocks = [_heading("a"), _heading("b")]
        css = generate_page_css(blocks)
        assert css.index(".widget-a") < css.index(".widget-b")


# ── Balisage ─────────────────────────────────────────────────────────────────

class TestRenderBlock:
    def test_empty_code_block(self):
        block = Block(id="c1", type="heading", mode="code")
        assert render_block(block) == "<!-- Empty Code Block -->"

    def test_empty_string_code_block(self):
        block = Block(id="c1", type="heading", mode="code", html_content="")
        assert render_block(block) == "<!-- Empty Code Block -->"

    def test_code_mode_verbatim(self):
        html = '<section class="custom"><script>track()</script></section>'
        block = Block(id="c1", type="heading", mode="code", html_content=html)
        assert render_block(block) == html

    def test_visual_text_escaped(self):
        html = render_block(_heading(text="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_heading_markup(self):
        html = render_block(_heading(level="h1"))
        assert html.startswith('<h1 class="widget widget-h1" style="text-align: left;')
        assert html.endswith(">Hello</h1>")

    def test_heading_link(self):
        html = render_block(_heading(link={"url": "/about", "openInNewTab": True}))
        assert '<a href="/about" target="_blank">Hello</a>' in html

    def test_attributes(self):
        block = _heading(advanced={"cssId": "main", "cssClasses": "big", "responsive": {"hideOnMobile": True}})
        html = render_block(block, inline=False)
        assert 'id="main"' in html
        assert 'class="widget widget-h1 max-md:hidden big"' in html
        assert "style=" not in html

    def test_button_markup(self):
        block = load_block({"id": "b1", "type": "button", "content": {
            "text": "Buy", "link": {"url": "/checkout", "nofollow": True}, "alignment": {"desktop": "center"},
        }})
        html = render_block(block)
        assert html.startswith('<div style="text-align: center">')
        assert 'href="/checkout" rel="nofollow">Buy</a>' in html

    def test_submit_button(self):
        block = load_block({"id": "b1", "type": "button", "content": {"text": "Send", "link": {}, "buttonType": "submit"}})
        assert '<button type="submit"' in render_block(block)

    def test_button_icon_placeholder(self):
        block = load_block({"id": "b1", "type": "button", "content": {
            "text": "Go", "link": {}, "icon": {"enabled": True, "name": "Nope", "position": "left"},
        }})
        html = render_block(block)
        assert 'data-icon="HelpCircle"' in html
        assert html.index("data-icon") < html.index("Go</a>")

    def test_container_placeholder(self):
        html = render_block(load_block({"id": "g1", "type": "grid"}))
        assert "<!-- Grid children - add your content here -->" in html

    def test_unknown_type(self):
        html = render_block(load_block({"id": "u1", "type": "mystery"}))
        assert html == '<div class="widget widget-unknown" data-widget-type="mystery">Unknown block: mystery</div>'

    def test_opaque_type(self):
        html = render_block(load_block({"id": "f1", "type": "features", "content": {"items": []}}))
        assert "<!-- features -->" in html

    def test_render_visual_ignores_mode(self):
        block = Block(id="c1", type="heading", mode="code", html_content="<b>x</b>")
        assert "Your Heading Here" in render_visual(block)

    def test_every_palette_widget_renders(self):
        from widget_builder.core.schemas import WIDGET_LIBRARY
        for widget in WIDGET_LIBRARY:
            html = render_block(load_block({"id": "w", "type": widget.type}))
            assert "widget-w" in html


# ── Document ─────────────────────────────────────────────────────────────────

class TestRenderDocument:
    def test_full_page(self):
        page = load_page({"title": "Home & co", "blocks": [
            {"id": "h1", "type": "heading", "content": {"text": "Hello", "style": {}}},
            {"id": "c1", "type": "paragraph", "mode": "code", "htmlContent": "<marquee>hi</marquee>"},
        ]})
        html = render_document(page)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Home &amp; co</title>" in html
        assert ".widget-h1 {" in html
        assert "<marquee>hi</marquee>" in html
        assert html.index("Hello") < html.index("<marquee>")

    def test_document_blocks_not_inline_styled(self):
        html = render_document(PageDocument(blocks=[_heading()]))
        assert '<h2 class="widget widget-h1">Hello</h2>' in html

    def test_block_list_and_title(self):
        html = render_document([_heading()], title="Preview", extra_head='<link rel="icon" href="/f.ico">')
        assert "<title>Preview</title>" in html
        assert '<link rel="icon" href="/f.ico">' in html

    def test_html_renderer_protocol(self):
        renderer = HtmlRenderer(breakpoint="mobile")
        assert isinstance(renderer, Renderer)
        block = _heading(style={"typography": {"fontSize": {"desktop": 48, "mobile": 28}}})
        assert "font-size: 28px" in renderer.render_block(block)
        assert "<!DOCTYPE html>" in renderer.render_document(PageDocument(blocks=[block]))
