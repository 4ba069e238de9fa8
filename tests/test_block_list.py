"""Tests liste de blocs : insertion, import de modèles, déplacement, duplication, suppression."""
import pytest

from widget_builder.core.errors import UnknownWidgetType
from widget_builder.core.schemas import TemplateRecord
from widget_builder.editor import (
    delete, duplicate, find_block, import_template, insert, move, new_block, patch, replace,
)


@pytest.fixture
def blocks(ids):
    doc = []
    for widget_type in ("heading", "paragraph", "button"):
        doc = insert(doc, widget_type, id_factory=ids)
    return doc


def _ids(blocks):
    return [b.id for b in blocks]


# ── Création / insertion ─────────────────────────────────────────────────────

class TestInsert:
    def test_new_block_defaults(self, ids):
        block = new_block("heading", id_factory=ids)
        assert block.id == "b1"
        assert block.mode == "visual"
        assert block.content.text == "Your Heading Here"
        assert block.code_version_history == []

    def test_new_countdown_gets_target(self, ids):
        assert new_block("countdown", id_factory=ids).content.target_date.endswith("Z")

    def test_unknown_type_raises(self, ids):
        with pytest.raises(UnknownWidgetType):
            insert([], "carousel-3d", id_factory=ids)

    def test_append_by_default(self, blocks):
        assert _ids(blocks) == ["b1", "b2", "b3"]
        assert [b.type for b in blocks] == ["heading", "paragraph", "button"]

    def test_insert_at_index(self, blocks, make_ids):
        result = insert(blocks, "spacer", 1, id_factory=make_ids("s"))
        assert _ids(result) == ["b1", "s1", "b2", "b3"]

    @pytest.mark.parametrize("index,position", [(-5, 0), (99, 3)])
    def test_index_clamped(self, blocks, make_ids, index, position):
        result = insert(blocks, "spacer", index, id_factory=make_ids("s"))
        assert result[position].id == "s1"

    def test_untouched_instances_reused(self, blocks, make_ids):
        result = insert(blocks, "spacer", 0, id_factory=make_ids("s"))
        assert result is not blocks
        assert all(a is b for a, b in zip(result[1:], blocks))
        assert len(blocks) == 3

    def test_insert_raw_block(self, blocks, make_ids):
        raw = {"id": "b1", "type": "container", "content": {"backgroundColor": "#fff", "padding": 24}}
        result = insert(blocks, raw, id_factory=make_ids("t"))
        assert result[-1].id == "t1"
        assert result[-1].content.background.color == "#fff"


# ── Import de modèles ────────────────────────────────────────────────────────

class TestImportTemplate:
    def test_ids_pairwise_distinct(self, blocks, ids):
        template = TemplateRecord(id="t", name="Landing", content=[
            {"id": "b1", "type": "heading", "content": {"text": "Welcome", "style": {}}},
            {"id": "b2", "type": "button", "content": {"text": "Buy", "url": "/checkout"}},
            {"id": "b2", "type": "paragraph"},
        ])
        result = import_template(blocks, template, id_factory=ids)
        result_ids = _ids(result)
        assert len(result) == 6
        assert len(set(result_ids)) == len(result_ids)
        assert result_ids[:3] == ["b1", "b2", "b3"]

    def test_ids_regenerated_even_without_conflict(self, make_ids):
        result = import_template([], {"id": "x", "type": "spacer"}, id_factory=make_ids("n"))
        assert _ids(result) == ["n1"]

    def test_template_dict(self, blocks, make_ids):
        template = {"id": "t", "name": "Hero", "category": "marketing",
                    "content": {"type": "hero", "content": {"headline": "Big"}}}
        result = import_template(blocks, template, 0, id_factory=make_ids("n"))
        assert result[0].type == "hero"
        assert result[0].content.headline == "Big"

    def test_legacy_content_migrated_on_import(self, make_ids):
        result = import_template([], [{"type": "button", "content": {"text": "Buy", "url": "/checkout"}}],
                                 id_factory=make_ids("n"))
        assert result[0].content.link.url == "/checkout"


# ── Réorganisation ───────────────────────────────────────────────────────────

class TestMove:
    def test_move_forward(self, blocks):
        assert _ids(move(blocks, "b1", 2)) == ["b2", "b3", "b1"]

    def test_move_backward(self, blocks):
        assert _ids(move(blocks, "b3", 0)) == ["b3", "b1", "b2"]

    def test_move_clamped(self, blocks):
        assert _ids(move(blocks, "b1", 42)) == ["b2", "b3", "b1"]

    def test_identity_preserved(self, blocks):
        result = move(blocks, "b1", 2)
        assert result[2] is blocks[0]

    def test_unknown_id(self, blocks):
        result = move(blocks, "nope", 0)
        assert result == blocks


class TestDuplicate:
    def test_inserted_after_original(self, blocks, make_ids):
        result = duplicate(blocks, "b2", id_factory=make_ids("d"))
        assert _ids(result) == ["b1", "b2", "d1", "b3"]
        assert result[2].content == result[1].content

    def test_isolation(self, blocks, make_ids):
        result = duplicate(blocks, "b1", id_factory=make_ids("d"))
        original, copy = result[0], result[1]
        copy.content.style.typography.font_size.desktop = 99
        assert original.content.style.typography.font_size.desktop == 36

        edited = patch(result, "d1", {"text": "Changed"})
        assert find_block(edited, "d1").content.text == "Changed"
        assert find_block(edited, "b1").content.text == "Your Heading Here"

    def test_history_copied_independently(self, blocks, make_ids):
        from widget_builder.editor import apply_code
        coded = replace(blocks, apply_code(blocks[0], "<p>v1</p>"))
        result = duplicate(coded, "b1", id_factory=make_ids("d"))
        assert result[1].code_version_history == result[0].code_version_history
        assert result[1].code_version_history[0] is not result[0].code_version_history[0]

    def test_unknown_id(self, blocks):
        assert duplicate(blocks, "nope") == blocks


class TestDelete:
    def test_delete(self, blocks):
        assert _ids(delete(blocks, "b2")) == ["b1", "b3"]

    def test_missing_id_unchanged(self, blocks):
        result = delete(blocks, "missing")
        assert result == blocks
        assert all(a is b for a, b in zip(result, blocks))

    def test_confirm_refused(self, blocks):
        seen = []

        def confirm(block):
            seen.append(block.id)
            return False

        assert delete(blocks, "b2", confirm) == blocks
        assert seen == ["b2"]

    def test_confirm_accepted(self, blocks):
        assert _ids(delete(blocks, "b2", lambda b: True)) == ["b1", "b3"]


class TestReplace:
    def test_replace(self, blocks):
        updated = blocks[1].model_copy(update={"mode": "code"})
        result = replace(blocks, updated)
        assert result[1] is updated
        assert result[0] is blocks[0]

    def test_replace_unknown(self, blocks):
        ghost = blocks[0].model_copy(update={"id": "ghost"})
        assert replace(blocks, ghost) == blocks
