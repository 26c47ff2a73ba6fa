# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus


@dataclass(slots=True, frozen=True)
class ContentCollection:
    """A list-shaped portfolio collection and how its writes are stamped."""

    name: str
    route: str
    label: str
    plural: str
    create_verb: str = "add"
    create_status: HTTPStatus = HTTPStatus.OK
    stamp_owner: bool = False
    stamp_created_at: bool = False

    @property
    def created_word(self) -> str:
        return "created" if self.create_verb == "create" else "added"


@dataclass(slots=True, frozen=True)
class SingletonCollection:
    """A collection holding exactly one document, replaced wholesale."""

    name: str
    route: str
    title: str


PROJECTS = ContentCollection(
    name="projects",
    route="projects",
    label="Project",
    plural="projects",
    create_verb="create",
    create_status=HTTPStatus.CREATED,
    stamp_owner=True,
    stamp_created_at=True,
)
SKILLS = ContentCollection(name="skills", route="skills", label="Skill", plural="skills")
EXPERIENCE = ContentCollection(
    name="experience", route="experience", label="Experience", plural="experience"
)
EDUCATION = ContentCollection(
    name="education", route="education", label="Education", plural="education"
)
CERTIFICATES = ContentCollection(
    name="certificates",
    route="certificates",
    label="Certificate",
    plural="certificates",
    stamp_created_at=True,
)

LIST_COLLECTIONS: tuple[ContentCollection, ...] = (
    PROJECTS,
    SKILLS,
    EXPERIENCE,
    EDUCATION,
    CERTIFICATES,
)

CONTACT_MESSAGES = "contacts"

CONTACT_INFO = SingletonCollection(name="contactInfo", route="contact-info", title="contact info")
HOME_PAGE = SingletonCollection(name="homePage", route="homepage", title="home page")

SINGLETON_COLLECTIONS: tuple[SingletonCollection, ...] = (CONTACT_INFO, HOME_PAGE)
