"""Sample contact-record model. Usable as --model quality_score.sample:build_contact_model."""

import re

from quality_score.model import ScoringModel

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_RE = re.compile(r"^\+?[0-9 ()-]{7,}$")


def build_contact_model() -> ScoringModel:
    model = ScoringModel.create("contact")

    model.field("name", 2, required=True).validator(
        lambda v: isinstance(v, str) and len(v.strip()) >= 2, "Name is too short."
    )
    model.field("email", 3).validator(
        lambda v: isinstance(v, str), "Email must be a string.", True
    ).validator(
        lambda v: isinstance(v, str) and EMAIL_RE.match(v), "Email is not well formed."
    )
    model.field("phone", 1).validator(
        lambda v: isinstance(v, str) and PHONE_RE.match(v), "Phone number is not well formed."
    )
    model.field("age", 1).validator(
        lambda v: isinstance(v, int) and not isinstance(v, bool), "Age must be an integer.", True
    ).validator(
        lambda v: isinstance(v, int) and 0 < v < 130, "Age is out of range."
    )
    return model
