"""Tests for renderer overrides and form sessions."""

import logging

import pytest

from formknobs_common import serialize
from formknobs_forms import (
    FieldView,
    FormModel,
    FormSchema,
    FormSession,
    RendererRegistry,
    TextField,
    ToggleField,
    ValidationType,
    Validator,
)


@pytest.fixture
def schema():
    return FormSchema(
        TextField(
            "email",
            "Email",
            validators=[
                Validator()
                .required("Required")
                .type_check(ValidationType.EMAIL, "Bad email")
            ],
        ),
        ToggleField("subscribe", "Subscribe"),
    )


class TestRendererRegistry:
    """Test RendererRegistry."""

    def test_register_and_lookup(self):
        registry = RendererRegistry()
        renderer = lambda element, model: element.id.upper()  # noqa: E731

        registry.register_renderer("email", renderer)

        assert registry.custom_renderer("email") is renderer
        assert registry.custom_renderer("name") is None

    def test_register_overwrites(self):
        registry = RendererRegistry()
        registry.register_renderer("email", lambda e, m: "first")
        registry.register_renderer("email", lambda e, m: "second")
        assert registry.custom_renderer("email")(None, None) == "second"

    def test_unregister_is_tolerant(self):
        registry = RendererRegistry()
        registry.register_renderer("email", lambda e, m: "x")
        registry.unregister_renderer("email")
        registry.unregister_renderer("email")
        assert registry.custom_renderer("email") is None

    def test_reset(self):
        registry = RendererRegistry()
        registry.register_renderer("a", lambda e, m: "a")
        registry.register_renderer("b", lambda e, m: "b")
        registry.reset()
        assert registry.count() == 0

    def test_registries_are_independent(self):
        first = RendererRegistry()
        second = RendererRegistry()
        first.register_renderer("email", lambda e, m: "x")
        assert second.custom_renderer("email") is None


class TestFormSession:
    """Test FormSession rendering and submission."""

    def test_render_activates_fields_in_order(self, schema):
        session = FormSession(schema)

        views = session.render()

        assert [view.key for view in views] == ["email", "subscribe"]
        assert all(isinstance(view, FieldView) for view in views)
        assert session.model.registered_keys() == ["email", "subscribe"]

    def test_registry_override(self, schema):
        registry = RendererRegistry()
        registry.register_renderer(
            "email", lambda element, model: f"custom:{model.string_value(element.id)}"
        )
        session = FormSession(schema, registry=registry)
        session.model.set_value("a@b.com", "email")

        rendered = session.render()

        assert rendered[0] == "custom:a@b.com"
        assert isinstance(rendered[1], FieldView)

    def test_field_content_takes_precedence(self, schema):
        registry = RendererRegistry()
        registry.register_renderer("email", lambda element, model: "registry")
        session = FormSession(
            schema,
            registry=registry,
            field_content=lambda element, model: f"content:{element.id}",
        )

        assert session.render() == ["content:email", "content:subscribe"]
        assert session.model.is_registered("email")

    def test_uses_given_model(self, schema):
        model = FormModel()
        session = FormSession(schema, model=model)
        session.render()
        assert model.is_registered("subscribe")

    def test_submit_invalid(self, schema, caplog):
        session = FormSession(schema)
        session.render()
        assert not session.can_submit

        with caplog.at_level(logging.INFO, logger="formknobs_forms.session"):
            submission = session.submit()

        assert not submission.valid
        assert submission.payload == {}
        assert submission.errors == {"email": "Required"}
        assert session.model.is_touched("email")
        assert session.model.is_touched("subscribe")
        assert session.render()[0].error == "Required"
        assert "rejected" in caplog.text

    def test_submit_valid(self, schema):
        session = FormSession(schema)
        session.render()
        session.model.bind("email").set("a@b.com")
        session.model.bind("subscribe").set(True)

        assert session.can_submit
        submission = session.submit()

        assert submission.valid
        assert submission.payload == {"email": "a@b.com", "subscribe": True}
        assert serialize(submission) == {
            "valid": True,
            "payload": {"email": "a@b.com", "subscribe": True},
            "errors": {},
        }

    def test_submit_before_render_is_vacuously_valid(self, schema):
        submission = FormSession(schema).submit()
        assert submission.valid
        assert submission.payload == {}

    def test_snapshot_serializes_views(self, schema):
        session = FormSession(schema)
        session.model.set_value("abc", "email")
        session.model.mark_touched("email")

        snapshot = session.snapshot()

        assert snapshot["can_submit"] is False
        assert [entry["key"] for entry in snapshot["fields"]] == ["email", "subscribe"]
        assert snapshot["fields"][0]["error"] == "Bad email"
        assert snapshot["fields"][1]["kind"] == "toggle"
        assert snapshot["fields"][1]["value"] is False

    def test_snapshot_keeps_custom_output(self, schema):
        registry = RendererRegistry()
        registry.register_renderer("email", lambda element, model: "custom")
        session = FormSession(schema, registry=registry)
        session.model.set_value("a@b.com", "email")

        snapshot = session.snapshot()

        assert snapshot["fields"][0] == "custom"
        assert snapshot["fields"][1]["key"] == "subscribe"
        assert snapshot["can_submit"] is True
