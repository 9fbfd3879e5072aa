"""Tests for modal action resolution, default actions and layout policy."""

from unittest.mock import MagicMock

import pytest

from actionmodal.actions import ActionRole, ModalAction, ModalConfiguration, TriggerAction


def names(actions: list[ModalAction]) -> list[str]:
    return [action.get_name() for action in actions]


@pytest.fixture
def trigger() -> TriggerAction:
    return TriggerAction.make("publish")


class TestDefaultModalActions:
    """Owners with nothing configured get submit and cancel."""

    def test_submit_then_cancel(self, trigger: TriggerAction):
        actions = trigger.get_modal_actions()

        assert names(actions) == ["submit", "cancel"]

    def test_default_labels(self, trigger: TriggerAction):
        submit, cancel = trigger.get_modal_actions()

        assert submit.get_label() == "Submit"
        assert cancel.get_label() == "Cancel"

    def test_default_roles(self, trigger: TriggerAction):
        submit, cancel = trigger.get_modal_actions()

        assert submit.get_role() is ActionRole.SUBMIT
        assert cancel.get_role() is ActionRole.CANCEL

    def test_submit_uses_owner_callback(self, trigger: TriggerAction):
        trigger.callback("call_publish")

        assert trigger.get_modal_submit_action().get_callback_name() == "call_publish"

    def test_default_owner_color_is_used_for_submit(self, trigger: TriggerAction):
        submit, cancel = trigger.get_modal_actions()

        assert submit.get_color() == "primary"
        assert cancel.get_color() == "gray"

    def test_fresh_instances_each_call(self, trigger: TriggerAction):
        assert trigger.get_modal_submit_action() is not trigger.get_modal_submit_action()
        assert trigger.get_modal_cancel_action() is not trigger.get_modal_cancel_action()


class TestSubmitActionColor:
    """The default submit action never renders gray."""

    def test_gray_owner_becomes_primary(self, trigger: TriggerAction):
        trigger.color("gray")

        assert trigger.get_modal_submit_action().get_color() == "primary"

    def test_danger_owner_stays_danger(self, trigger: TriggerAction):
        trigger.color("danger")

        assert trigger.get_modal_submit_action().get_color() == "danger"

    def test_deferred_owner_color(self, trigger: TriggerAction):
        trigger.color(lambda: "warning")

        assert trigger.get_modal_submit_action().get_color() == "warning"

    @pytest.mark.parametrize("color", ["gray", "danger", "primary", "success"])
    def test_cancel_is_always_gray(self, trigger: TriggerAction, color: str):
        trigger.color(color)

        assert trigger.get_modal_cancel_action().get_color() == "gray"


class TestSubmitButtonLabel:
    """modal_button() sets the default submit label."""

    def test_literal_label(self, trigger: TriggerAction):
        trigger.modal_button("Publish now")

        assert trigger.get_modal_submit_action().get_label() == "Publish now"

    def test_deferred_label_sees_trigger(self, trigger: TriggerAction):
        trigger.modal_button(lambda action: f"Yes, {action.get_name()}")

        assert trigger.get_modal_button_label() == "Yes, publish"

    def test_unset_label_uses_translation(self):
        translator = MagicMock()
        translator.get.side_effect = lambda key: f"<{key}>"
        trigger = TriggerAction.make("publish", translator)

        assert trigger.get_modal_button_label() == "<modal.actions.submit.label>"
        assert trigger.get_modal_cancel_action().get_label() == "<modal.actions.cancel.label>"


class TestSubmitAndCancelOverrides:
    """modal_submit_action() and modal_cancel_action() replace the defaults."""

    def test_submit_override_used(self, trigger: TriggerAction):
        custom = ModalAction.make("confirm").submit("cb")
        trigger.modal_submit_action(custom)

        assert trigger.get_modal_submit_action() is custom
        assert names(trigger.get_modal_actions()) == ["confirm", "cancel"]

    def test_cancel_override_used(self, trigger: TriggerAction):
        custom = ModalAction.make("close").cancel()
        trigger.modal_cancel_action(custom)

        assert names(trigger.get_modal_actions()) == ["submit", "close"]

    def test_deferred_override(self, trigger: TriggerAction):
        trigger.modal_submit_action(lambda action: ModalAction.make(f"{action.get_name()}_it"))

        assert trigger.get_modal_submit_action().get_name() == "publish_it"

    def test_override_not_recolored(self, trigger: TriggerAction):
        trigger.color("gray")
        trigger.modal_submit_action(ModalAction.make("confirm").color("gray"))

        assert trigger.get_modal_submit_action().get_color() == "gray"

    def test_submit_override_resolving_to_none_uses_default(self, trigger: TriggerAction):
        trigger.modal_submit_action(lambda: None)

        assert trigger.get_modal_submit_action().get_name() == "submit"
        assert names(trigger.get_modal_actions()) == ["submit", "cancel"]

    def test_cancel_override_resolving_to_none_uses_default(self, trigger: TriggerAction):
        trigger.modal_cancel_action(lambda action: None)

        cancel = trigger.get_modal_cancel_action()
        assert cancel.get_name() == "cancel"
        assert cancel.is_cancel()
        assert names(trigger.get_modal_actions()) == ["submit", "cancel"]


class TestDefaultActionContext:
    """Default submit and cancel actions resolve against the trigger's context."""

    def test_submit_sees_trigger_arguments(self, trigger: TriggerAction):
        trigger.arguments({"locked": True})
        submit = trigger.get_modal_submit_action().hidden(
            lambda arguments: arguments["locked"]
        )

        assert submit.is_hidden()

    def test_cancel_sees_trigger(self, trigger: TriggerAction):
        cancel = trigger.get_modal_cancel_action().label(
            lambda action: f"Keep {action.get_name()}"
        )

        assert cancel.get_label() == "Keep publish"

    def test_submit_still_sees_itself(self, trigger: TriggerAction):
        submit = trigger.get_modal_submit_action().label(
            lambda modal_action, action: f"{action.get_name()}:{modal_action.get_name()}"
        )

        assert submit.get_label() == "publish:submit"


class TestExtraModalActions:
    """Extra actions sit between submit and cancel."""

    def test_extras_between_submit_and_cancel(self, trigger: TriggerAction):
        trigger.extra_modal_actions([ModalAction.make("a"), ModalAction.make("b")])

        assert names(trigger.get_modal_actions()) == ["submit", "a", "b", "cancel"]

    def test_centered_reverses_whole_list(self, trigger: TriggerAction):
        trigger.extra_modal_actions([ModalAction.make("a"), ModalAction.make("b")])
        trigger.center_modal()

        assert names(trigger.get_modal_actions()) == ["cancel", "b", "a", "submit"]

    def test_deferred_extras(self, trigger: TriggerAction):
        trigger.extra_modal_actions(lambda: [ModalAction.make("later")])

        assert names(trigger.get_extra_modal_actions()) == ["later"]

    def test_deferred_extras_returning_none(self, trigger: TriggerAction):
        trigger.extra_modal_actions(lambda: None)

        assert trigger.get_extra_modal_actions() == []

    def test_extra_helper_is_gray_and_wired(self, trigger: TriggerAction):
        action = trigger.make_extra_modal_action("schedule", {"when": "later"})

        assert action.get_color() == "gray"
        assert action.get_callback_name() == trigger.get_callback_name()
        assert action.get_arguments() == {"when": "later"}


class TestModalActionsOverride:
    """An explicit list replaces the composed one."""

    def test_override_used_as_given(self, trigger: TriggerAction):
        trigger.modal_actions([ModalAction.make("x"), ModalAction.make("y")])

        assert names(trigger.get_modal_actions()) == ["x", "y"]

    def test_override_ignores_everything_else(self, trigger: TriggerAction):
        trigger.modal_actions([ModalAction.make("x"), ModalAction.make("y")])
        trigger.extra_modal_actions([ModalAction.make("a")])
        trigger.modal_submit_action(ModalAction.make("confirm"))
        trigger.modal_cancel_action(ModalAction.make("close"))
        trigger.center_modal()

        assert names(trigger.get_modal_actions()) == ["x", "y"]

    def test_override_is_filtered(self, trigger: TriggerAction):
        trigger.modal_actions([ModalAction.make("x").hidden(), ModalAction.make("y")])

        assert names(trigger.get_modal_actions()) == ["y"]

    def test_empty_override_gives_no_actions(self, trigger: TriggerAction):
        trigger.modal_actions([])

        assert trigger.get_modal_actions() == []

    def test_deferred_override(self, trigger: TriggerAction):
        trigger.modal_actions(lambda: [ModalAction.make("x")])

        assert names(trigger.get_modal_actions()) == ["x"]

    def test_deferred_override_returning_none_composes_defaults(self, trigger: TriggerAction):
        trigger.modal_actions(lambda: None)

        assert names(trigger.get_modal_actions()) == ["submit", "cancel"]

    def test_resetting_override_restores_defaults(self, trigger: TriggerAction):
        trigger.modal_actions([ModalAction.make("x")])
        trigger.modal_actions()

        assert names(trigger.get_modal_actions()) == ["submit", "cancel"]


class TestHiddenActionFiltering:
    """Hidden actions are dropped after ordering."""

    def test_hidden_submit_dropped(self, trigger: TriggerAction):
        trigger.modal_submit_action(ModalAction.make("submit").hidden())
        trigger.extra_modal_actions([ModalAction.make("a")])

        assert names(trigger.get_modal_actions()) == ["a", "cancel"]

    def test_order_preserved_when_centered(self, trigger: TriggerAction):
        trigger.extra_modal_actions(
            [ModalAction.make("a"), ModalAction.make("b").hidden(), ModalAction.make("c")]
        )
        trigger.center_modal()

        assert names(trigger.get_modal_actions()) == ["cancel", "c", "a", "submit"]

    def test_all_hidden(self, trigger: TriggerAction):
        trigger.modal_submit_action(ModalAction.make("submit").hidden())
        trigger.modal_cancel_action(ModalAction.make("cancel").visible(False))

        assert trigger.get_modal_actions() == []


class TestWizard:
    """Stepped triggers render no modal actions."""

    def test_wizard_has_no_actions(self, trigger: TriggerAction):
        trigger.steps(["details", "review"])
        trigger.modal_actions([ModalAction.make("x")])
        trigger.extra_modal_actions([ModalAction.make("a")])

        assert trigger.is_wizard()
        assert trigger.get_modal_actions() == []

    def test_empty_steps_is_not_a_wizard(self, trigger: TriggerAction):
        trigger.steps([])

        assert not trigger.is_wizard()
        assert names(trigger.get_modal_actions()) == ["submit", "cancel"]


class TestModalWidthAndCentering:
    """Width defaults and the centering derivation."""

    def test_default_width(self, trigger: TriggerAction):
        assert trigger.get_modal_width() == "4xl"

    def test_default_is_not_centered(self, trigger: TriggerAction):
        assert not trigger.is_modal_centered()

    @pytest.mark.parametrize("width", ["xs", "sm"])
    def test_small_widths_are_centered(self, trigger: TriggerAction, width: str):
        trigger.modal_width(width)

        assert trigger.is_modal_centered()

    @pytest.mark.parametrize("width", ["md", "lg", "7xl", "screen"])
    def test_larger_widths_are_not_centered(self, trigger: TriggerAction, width: str):
        trigger.modal_width(width)

        assert not trigger.is_modal_centered()

    def test_explicit_false_wins_over_width(self, trigger: TriggerAction):
        trigger.modal_width("xs").center_modal(False)

        assert not trigger.is_modal_centered()

    def test_explicit_true_wins_over_width(self, trigger: TriggerAction):
        trigger.modal_width("4xl").center_modal()

        assert trigger.is_modal_centered()

    def test_deferred_none_derives_from_width(self, trigger: TriggerAction):
        trigger.modal_width(lambda: "sm").center_modal(lambda: None)

        assert trigger.is_modal_centered()

    def test_small_width_reverses_default_actions(self, trigger: TriggerAction):
        trigger.modal_width("sm")

        assert names(trigger.get_modal_actions()) == ["cancel", "submit"]


class TestSlideOver:
    def test_default_is_not_slide_over(self, trigger: TriggerAction):
        assert not trigger.is_modal_slide_over()

    def test_slide_over(self, trigger: TriggerAction):
        assert trigger.slide_over().is_modal_slide_over()

    def test_deferred_slide_over(self, trigger: TriggerAction):
        trigger.slide_over(lambda arguments: arguments.get("panel", False))
        trigger.arguments({"panel": True})

        assert trigger.is_modal_slide_over()


class TestModalContent:
    """Heading, subheading, content and footer."""

    def test_heading_falls_back_to_label(self, trigger: TriggerAction):
        trigger.label("Publish article")

        assert trigger.get_modal_heading() == "Publish article"

    def test_heading_falls_back_to_headline_of_name(self):
        assert TriggerAction.make("delete_post").get_modal_heading() == "Delete post"

    def test_explicit_heading(self, trigger: TriggerAction):
        trigger.modal_heading("Are you sure?")

        assert trigger.get_modal_heading() == "Are you sure?"

    def test_unset_optional_content(self, trigger: TriggerAction):
        assert trigger.get_modal_subheading() is None
        assert trigger.get_modal_content() is None
        assert trigger.get_modal_footer() is None

    def test_deferred_content_sees_modal(self, trigger: TriggerAction):
        trigger.modal_width("lg")
        trigger.modal_content(lambda modal: f"width {modal.get_modal_width()}")

        assert trigger.get_modal_content() == "width lg"

    def test_deferred_errors_propagate(self, trigger: TriggerAction):
        def broken():
            raise ValueError("no content")

        trigger.modal_footer(broken)

        with pytest.raises(ValueError, match="no content"):
            trigger.get_modal_footer()


class TestModalConfigurationWithOwnerDouble:
    """ModalConfiguration only talks to its owner through the owner interface."""

    @pytest.fixture
    def owner(self) -> MagicMock:
        owner = MagicMock()
        owner.is_wizard.return_value = False
        owner.get_color.return_value = "gray"
        owner.get_callback_name.return_value = "host_call"
        owner.get_evaluation_context.return_value = {}
        owner.make_modal_action.side_effect = ModalAction.make
        return owner

    @pytest.fixture
    def translator(self) -> MagicMock:
        translator = MagicMock()
        translator.get.return_value = "Label"
        return translator

    def test_factory_called_by_name(self, owner: MagicMock, translator: MagicMock):
        ModalConfiguration(owner, translator).get_modal_actions()

        called = [call.args[0] for call in owner.make_modal_action.call_args_list]
        assert called == ["submit", "cancel"]

    def test_submit_bound_to_owner_callback(self, owner: MagicMock, translator: MagicMock):
        submit = ModalConfiguration(owner, translator).get_modal_submit_action()

        assert submit.get_callback_name() == "host_call"
        assert submit.get_color() == "primary"

    def test_wizard_skips_factory(self, owner: MagicMock, translator: MagicMock):
        owner.is_wizard.return_value = True

        assert ModalConfiguration(owner, translator).get_modal_actions() == []
        owner.make_modal_action.assert_not_called()

    def test_factory_errors_propagate(self, owner: MagicMock, translator: MagicMock):
        owner.make_modal_action.side_effect = LookupError("no factory")

        with pytest.raises(LookupError):
            ModalConfiguration(owner, translator).get_modal_actions()

    def test_setters_return_configuration(self, owner: MagicMock, translator: MagicMock):
        modal = ModalConfiguration(owner, translator)

        assert modal.modal_width("sm").center_modal().slide_over() is modal

    def test_resolution_does_not_change_slots(self, owner: MagicMock, translator: MagicMock):
        modal = ModalConfiguration(owner, translator).extra_modal_actions(
            [ModalAction.make("a")]
        )

        first = names(modal.get_modal_actions())
        second = names(modal.get_modal_actions())

        assert first == second == ["submit", "a", "cancel"]

    def test_defaults_resolve_against_owner_context(
        self, owner: MagicMock, translator: MagicMock
    ):
        owner.get_evaluation_context.return_value = {"arguments": {"id": 7}}
        modal = ModalConfiguration(owner, translator)

        submit = modal.get_modal_submit_action().label(lambda arguments: f"Save {arguments['id']}")
        cancel = modal.get_modal_cancel_action().hidden(lambda arguments: arguments["id"] == 7)

        assert submit.get_label() == "Save 7"
        assert cancel.is_hidden()
