import pytest
from pydantic import ValidationError

from portfolio.schemas import (
    BlogForm,
    ContactForm,
    EmailSettingsForm,
    PasswordChangeForm,
    ProjectForm,
    ServiceForm,
    SkillForm,
)


def test_checkbox_present_with_any_value_is_true():
    assert ProjectForm.from_fields({"title": "A", "featured": "off"}).featured is True
    assert ProjectForm.from_fields({"title": "A", "featured": ""}).featured is True


def test_checkbox_absent_is_false():
    assert ProjectForm.from_fields({"title": "A"}).featured is False
    assert BlogForm.from_fields({"title": "A"}).published is False
    assert EmailSettingsForm.from_fields({}).enabled is False


def test_numbers_fall_back_to_field_defaults():
    assert SkillForm.from_fields({"proficiency": "lots"}).proficiency == 80
    assert ServiceForm.from_fields({"order_index": ""}).order_index == 0
    assert EmailSettingsForm.from_fields({"smtp_port": "abc"}).smtp_port == 587


def test_numbers_parse_when_valid():
    assert SkillForm.from_fields({"proficiency": " 95 "}).proficiency == 95
    assert EmailSettingsForm.from_fields({"smtp_port": "465"}).smtp_port == 465


def test_overrides_win_over_submitted_fields():
    form = SkillForm.from_fields({"icon_url": "old"}, icon_url="/images/new")
    assert form.icon_url == "/images/new"


def test_contact_requires_every_field_but_accepts_empty_strings():
    form = ContactForm.from_fields({"name": "", "email": "", "subject": "", "message": ""})
    assert form.name == ""
    with pytest.raises(ValidationError):
        ContactForm.from_fields({"name": "x", "email": "y"})


def test_password_change_checks_confirmation():
    with pytest.raises(ValidationError):
        PasswordChangeForm.from_fields({
            "current_password": "admin123",
            "new_password": "long-enough-1",
            "confirm_password": "long-enough-2",
        })


def test_password_change_enforces_minimum_length():
    with pytest.raises(ValidationError):
        PasswordChangeForm.from_fields({
            "current_password": "admin123",
            "new_password": "short",
            "confirm_password": "short",
        })
