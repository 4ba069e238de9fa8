"""Tests compilateur de styles : couleurs, ombres, box model, visibilité, hover, icônes."""
from typing import get_args

import pytest

from widget_builder.blocks import Gradient, GridItemSettings, responsive
from widget_builder.blocks.registry import WidgetType, default_content
from widget_builder.renderer import IconSet, compile_grid_item, compile_style
from widget_builder.renderer.styles import fmt_num, gradient_css, space_keyword

ALL_TYPES = get_args(WidgetType)

GRADIENT = {
    "type": "linear",
    "angle": 45,
    "stops": [{"color": "#f00", "position": 0}, {"color": "#00f", "position": 100}],
}


def _heading(**style):
    return {"text": "Hi", "style": style}


# ── Général ──────────────────────────────────────────────────────────────────

class TestCompileGeneral:
    @pytest.mark.parametrize("widget_type", ALL_TYPES)
    @pytest.mark.parametrize("breakpoint", ["desktop", "tablet", "mobile"])
    def test_every_type_compiles(self, widget_type, breakpoint):
        compiled = compile_style(widget_type, default_content(widget_type), breakpoint)
        assert compiled.hints.get("placeholder") != "unknown"

    def test_deterministic_and_pure(self):
        content = default_content("button")
        before = content.model_dump()
        a = compile_style("button", content, "mobile")
        b = compile_style("button", content, "mobile")
        assert a == b
        assert content.model_dump() == before

    def test_raw_dict_is_normalized(self):
        compiled = compile_style("container", {"backgroundColor": "#fff", "padding": 24, "maxWidth": "md"})
        assert compiled.declarations["background-color"] == "#fff"
        assert compiled.declarations["padding-top"] == "24px"
        assert compiled.declarations["max-width"] == "896px"

    def test_unknown_type_placeholder(self):
        compiled = compile_style("mystery", {"x": 1})
        assert compiled.hints["placeholder"] == "unknown"
        assert compiled.hints["label"] == "Unknown block: mystery"
        assert compiled.declarations == {}

    def test_unknown_breakpoint(self):
        with pytest.raises(ValueError):
            compile_style("heading", None, "watch")


# ── Couleurs / ombres ────────────────────────────────────────────────────────

class TestColors:
    def test_solid_text_color(self):
        d = compile_style("heading", _heading(textColor={"type": "solid", "solid": "#111"})).declarations
        assert d["color"] == "#111"
        assert "background-clip" not in d

    def test_empty_solid_inherits(self):
        assert "color" not in compile_style("heading", None).declarations

    def test_gradient_text_color(self):
        compiled = compile_style("heading", _heading(textColor={"type": "gradient", "gradient": GRADIENT}))
        d = compiled.declarations
        assert d["background"] == "linear-gradient(45deg, #f00 0%, #00f 100%)"
        assert d["background-clip"] == "text"
        assert d["-webkit-background-clip"] == "text"
        assert d["-webkit-text-fill-color"] == "transparent"
        assert compiled.hints["clip_text"] is True

    def test_radial_gradient(self):
        d = compile_style("container", {"background": {"type": "gradient", "gradient": {**GRADIENT, "type": "radial"}}})
        assert d.declarations["background"] == "radial-gradient(circle, #f00 0%, #00f 100%)"

    def test_text_shadow(self):
        shadow = {"horizontal": 2, "vertical": 2, "blur": 4, "color": "#000"}
        d = compile_style("heading", _heading(textShadow=shadow)).declarations
        assert d["text-shadow"] == "2px 2px 4px #000"

    def test_zero_text_shadow_omitted(self):
        shadow = {"horizontal": 0, "vertical": 0, "blur": 0, "color": "#000"}
        assert "text-shadow" not in compile_style("heading", _heading(textShadow=shadow)).declarations

    def test_container_background_image(self):
        bg = {"type": "image", "image": {"url": "/bg.png", "size": "repeat"}}
        d = compile_style("container", {"layout": {}, "background": bg}).declarations
        assert d["background-image"] == "url('/bg.png')"
        assert d["background-repeat"] == "repeat"
        assert d["background-size"] == "auto"


# ── Box model / typo / largeur ───────────────────────────────────────────────

class TestBoxAndTypography:
    def test_four_side_declarations(self):
        content = {"text": "Hi", "style": {}, "advanced": {"padding": {"top": 1, "right": 2, "bottom": 3, "left": 4, "linked": False}}}
        d = compile_style("heading", content).declarations
        assert (d["padding-top"], d["padding-right"], d["padding-bottom"], d["padding-left"]) == ("1px", "2px", "3px", "4px")

    def test_responsive_font_size(self):
        content = _heading(typography={"fontSize": {"desktop": 48, "mobile": 28}})
        assert compile_style("heading", content, "desktop").declarations["font-size"] == "48px"
        assert compile_style("heading", content, "tablet").declarations["font-size"] == "48px"
        assert compile_style("heading", content, "mobile").declarations["font-size"] == "28px"

    def test_heading_defaults(self):
        d = compile_style("heading", None).declarations
        assert d["text-align"] == "left"
        assert d["font-size"] == "36px"
        assert d["font-weight"] == 700
        assert d["line-height"] == "1.2em"
        assert "letter-spacing" not in d

    @pytest.mark.parametrize("mode,expected", [
        ("full", {"width": "100%"}),
        ("inline", {"width": "auto", "display": "inline-block"}),
        ("custom", {"width": "50%"}),
    ])
    def test_width_modes(self, mode, expected):
        content = {"text": "Hi", "style": {}, "advanced": {"width": mode, "customWidth": 50, "customWidthUnit": "%"}}
        d = compile_style("heading", content).declarations
        for prop, value in expected.items():
            assert d[prop] == value

    def test_fmt_num(self):
        assert fmt_num(36.0) == "36"
        assert fmt_num(1.5) == "1.5"


# ── Visibilité / attributs personnalisés ─────────────────────────────────────

class TestVisibility:
    def test_classes_compose(self):
        content = {"text": "Hi", "style": {}, "advanced": {"responsive": {"hideOnTablet": True, "hideOnMobile": True}}}
        compiled = compile_style("heading", content)
        assert compiled.visibility_classes == ["md:hidden lg:block", "max-md:hidden"]

    def test_desktop_class(self):
        content = {"text": "Hi", "style": {}, "advanced": {"responsive": {"hideOnDesktop": True}}}
        assert compile_style("heading", content).visibility_classes == ["lg:hidden"]

    def test_hidden_breakpoint_display_none(self):
        content = {"text": "Hi", "style": {}, "advanced": {"responsive": {"hideOnMobile": True}}}
        mobile = compile_style("heading", content, "mobile")
        desktop = compile_style("heading", content, "desktop")
        assert mobile.declarations["display"] == "none"
        assert mobile.hidden is True
        assert "display" not in desktop.declarations
        assert desktop.hidden is False

    def test_custom_attributes_passthrough(self):
        advanced = {"cssId": "hero-title", "cssClasses": "big shiny", "customCSS": "selector { color: red; }"}
        compiled = compile_style("heading", {"text": "Hi", "style": {}, "advanced": advanced}, scope="b1")
        assert compiled.css_id == "hero-title"
        assert compiled.css_classes == "big shiny"
        assert compiled.custom_css == ".widget-b1 { color: red; }"

    def test_custom_css_without_scope(self):
        advanced = {"customCSS": "selector { color: red; }"}
        compiled = compile_style("heading", {"text": "Hi", "style": {}, "advanced": advanced})
        assert compiled.custom_css == "selector { color: red; }"


# ── Bouton ───────────────────────────────────────────────────────────────────

class TestButton:
    def test_defaults(self):
        compiled = compile_style("button", None)
        d = compiled.declarations
        assert d["color"] == "#ffffff"
        assert d["background-color"] == "#3b82f6"
        assert d["padding-top"] == "12px"
        assert d["padding-right"] == "24px"
        assert d["border-radius"] == "8px"
        assert d["transition"] == "all 300ms ease"
        assert "border-width" not in d

    def test_hover_falls_back_to_normal(self):
        content = {"text": "Go", "link": {}, "style": {"normal": {"textColor": "#000", "backgroundColor": "#eee"}}}
        d = compile_style("button", content).declarations
        assert d["--hover-color"] == "#000"
        assert d["--hover-bg"] == "#eee"
        assert d["--hover-border"] == "#eee"

    def test_hover_colors(self):
        content = {"text": "Go", "link": {}, "style": {"hover": {"backgroundColor": "#1d4ed8", "transitionDuration": 150}}}
        compiled = compile_style("button", content)
        assert compiled.declarations["--hover-bg"] == "#1d4ed8"
        assert compiled.declarations["transition"] == "all 150ms ease"
        assert "var(--hover-bg)" in compiled.hints["hover_rule"]

    def test_hover_box_shadow(self):
        shadow = {"horizontal": 0, "vertical": 8, "blur": 16, "spread": 0, "color": "#000"}
        compiled = compile_style("button", {"text": "Go", "link": {}, "style": {"hoverBoxShadow": shadow}})
        assert "box-shadow: 0px 8px 16px 0px #000;" in compiled.hints["hover_rule"]

    def test_stretch_alignment(self):
        content = {"text": "Go", "link": {}, "alignment": {"desktop": "left", "mobile": "stretch"}}
        assert compile_style("button", content, "mobile").declarations["width"] == "100%"
        assert "width" not in compile_style("button", content, "desktop").declarations

    def test_unknown_icon_placeholder(self):
        content = {"text": "Go", "link": {}, "icon": {"enabled": True, "name": "NoSuchIcon"}}
        compiled = compile_style("button", content)
        assert compiled.hints["icon"] == {"name": "HelpCircle", "found": False, "position": "right"}
        assert compiled.declarations["display"] == "inline-flex"

    def test_explicit_icon_resolver(self):
        content = {"text": "Go", "link": {}, "icon": {"enabled": True, "name": "Rocket"}}
        compiled = compile_style("button", content, icons=IconSet({"Rocket"}, placeholder="Dot"))
        assert compiled.hints["icon"]["name"] == "Rocket"
        compiled = compile_style("button", content, icons=IconSet(set(), placeholder="Dot"))
        assert compiled.hints["icon"]["name"] == "Dot"


# ── Conteneurs ───────────────────────────────────────────────────────────────

class TestContainers:
    def test_container_responsive_columns(self):
        content = default_content("container")
        cols = [compile_style("container", content, bp).declarations["grid-template-columns"]
                for bp in ("desktop", "tablet", "mobile")]
        assert cols == ["repeat(4, 1fr)", "repeat(2, 1fr)", "repeat(1, 1fr)"]

    def test_container_boxed(self):
        d = compile_style("container", None).declarations
        assert d["max-width"] == "1152px"
        assert d["margin-left"] == "auto"
        assert d["column-gap"] == "20px"
        assert "background-color" not in d

    def test_full_width_keeps_margins(self):
        d = compile_style("container", {"layout": {}, "advanced": {"maxWidth": "full"}}).declarations
        assert d["max-width"] == "100%"
        assert d["margin-left"] == "0px"

    def test_container_flex_mode(self):
        content = {"layout": {"displayType": "flex", "justifyContent": "between"}}
        d = compile_style("container", content).declarations
        assert d["display"] == "flex"
        assert d["justify-content"] == "space-between"
        assert d["align-items"] == "stretch"

    def test_container_hints(self):
        hints = compile_style("grid", None).hints
        assert hints["children"] == "placeholder"
        assert hints["label"] == "Grid"

    def test_flex_container(self):
        content = {"layout": {"direction": "column", "justifyContent": "start", "gap": {"desktop": 10, "mobile": 4}}}
        desktop = compile_style("flex-container", content, "desktop").declarations
        mobile = compile_style("flex-container", content, "mobile").declarations
        assert desktop["flex-direction"] == "column"
        assert desktop["justify-content"] == "flex-start"
        assert desktop["gap"] == "10px"
        assert mobile["gap"] == "4px"

    def test_smart_grid_templates(self):
        content = {"layout": {"columnTemplate": "200px 1fr", "rows": 2, "autoFlow": "row-dense"}}
        d = compile_style("smart-grid", content).declarations
        assert d["grid-template-columns"] == "200px 1fr"
        assert d["grid-template-rows"] == "repeat(2, auto)"
        assert d["grid-auto-flow"] == "row dense"
        assert d["min-height"] == "100px"

    def test_container_shadow(self):
        shadow = {"enabled": True, "horizontal": 0, "vertical": 4, "blur": 6, "spread": 0, "color": "#000"}
        d = compile_style("container", {"layout": {}, "shadow": shadow}).declarations
        assert d["box-shadow"] == "0px 4px 6px 0px #000"

    def test_grid_item(self):
        settings = GridItemSettings(column_span=responsive(2, 1, 1), column_start=1, align_self="center")
        assert compile_grid_item(settings, "desktop") == {
            "grid-column": "1 / span 2",
            "grid-row": "span 1",
            "align-self": "center",
        }
        assert compile_grid_item(settings, "mobile")["grid-column"] == "1 / span 1"

    def test_space_keywords(self):
        assert space_keyword("evenly") == "space-evenly"
        assert space_keyword("end", flex=True) == "flex-end"
        assert space_keyword("end") == "end"

    def test_gradient_without_stops(self):
        assert gradient_css(Gradient(stops=[])) == "linear-gradient(90deg, #000 0%, #666 100%)"


# ── Autres widgets ───────────────────────────────────────────────────────────

class TestOtherWidgets:
    def test_icon_widget(self):
        compiled = compile_style("icon", {"name": "Star", "size": 32})
        assert compiled.declarations["width"] == "32px"
        assert compiled.hints["icon"]["found"] is True

    def test_progress_bar_clamped(self):
        assert compile_style("progress-bar", {"value": 140}).hints["value"] == 100

    def test_social_icons(self):
        hints = compile_style("social-icons", None).hints
        assert [i["icon"] for i in hints["icons"]] == ["Facebook", "Twitter"]
        assert hints["size"] == 40

    def test_pricing_columns(self):
        d = compile_style("pricing-table", None).declarations
        assert d["grid-template-columns"] == "repeat(2, 1fr)"
