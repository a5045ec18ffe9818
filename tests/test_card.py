from smartnotes.client.card import NoteCard
from smartnotes.client.models import Note
from smartnotes.client.notify import Notifier

NOW = "2025-08-27T10:00:00+00:00"


def _note(**kw):
    data = {"id": "n1", "title": "Title", "content": "Body", "created_at": NOW, "updated_at": NOW}
    data.update(kw)
    return Note.model_validate(data)


def _card(note, generating=False):
    calls = {"edit": [], "delete": [], "summarize": []}
    notifier = Notifier()
    card = NoteCard(
        note,
        on_edit=calls["edit"].append,
        on_delete=calls["delete"].append,
        on_summarize=lambda *a: calls["summarize"].append(a),
        notifier=notifier,
        is_generating_summary=generating,
    )
    return card, calls, notifier


def test_long_content_is_truncated_until_expanded():
    text = "x" * 250
    card, _, _ = _card(_note(content=text))
    assert card.is_truncatable
    assert card.content_preview == "x" * 200 + "..."
    assert card.toggle_label == "Read more"
    card.toggle_expanded()
    assert card.content_preview == text
    assert card.toggle_label == "Show less"


def test_short_content_has_no_toggle():
    card, _, _ = _card(_note(content="short"))
    assert not card.is_truncatable
    assert card.toggle_label is None
    assert card.content_preview == "short"


def test_summary_block_and_labels():
    card, _, _ = _card(_note(summary="key points"))
    assert card.summary_block == "key points"
    assert card.summarize_label == "Regenerate Summary"
    card, _, _ = _card(_note())
    assert card.summary_block is None
    assert card.summarize_label == "Generate Summary"
    assert card.updated_label == "Aug 27, 2025"


def test_callbacks_receive_note_id_and_fields():
    note = _note(content="words here")
    card, calls, _ = _card(note)
    card.edit()
    card.delete()
    card.summarize()
    assert calls["edit"] == [note]
    assert calls["delete"] == ["n1"]
    assert calls["summarize"] == [("n1", "Title", "words here")]


def test_blank_content_is_refused_locally():
    card, calls, notifier = _card(_note(content="   "))
    assert card.summarize() is None
    assert calls["summarize"] == []
    assert notifier.last.title == "Cannot summarize"
    assert notifier.last.variant == "destructive"


def test_busy_flag_disables_summarize():
    card, calls, _ = _card(_note(), generating=True)
    assert card.summarize_disabled
    assert card.summarize_label == "Generating..."
    card.summarize()
    assert calls["summarize"] == []
