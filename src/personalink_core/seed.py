from __future__ import annotations

import logging
from datetime import UTC, datetime

from personalink_core.models import IconTag, LinkCategory, LinkRecord
from personalink_core.storage.base import LinkStore

logger = logging.getLogger(__name__)


def _link(
    link_id: str,
    title: str,
    url: str,
    author: str | None,
    description: str,
    icon_tag: IconTag,
    category: LinkCategory,
    created: str,
    popularity: int,
) -> LinkRecord:
    return LinkRecord(
        id=link_id,
        title=title,
        url=url,
        author=author,
        description=description,
        icon_tag=icon_tag,
        category=category,
        created_at=datetime.fromisoformat(created).replace(tzinfo=UTC),
        popularity=popularity,
        is_new=False,
    )


_C = LinkCategory
_I = IconTag

SEED_LINKS: tuple[LinkRecord, ...] = (
    _link("1", "NotebookLM", "https://notebooklm.google.com/", "Google",
          "An AI-powered research and writing assistant for synthesizing information.",
          _I.ASSISTANT, _C.WEBSITE, "2023-01-01T10:00:00", 85),
    _link("2", "OpenStax", "https://openstax.org/", "Rice University",
          "Free, peer-reviewed, openly licensed textbooks for college and AP courses.",
          _I.BOOK, _C.LEARNING, "2023-01-10T10:00:00", 90),
    _link("3", "Khan Academy", "https://www.khanacademy.org/", "Khan Academy",
          "Practice exercises, instructional videos and a personalized learning dashboard.",
          _I.COURSE, _C.LEARNING, "2023-02-01T10:00:00", 95),
    _link("4", "Project Gutenberg", "https://www.gutenberg.org/", "Various Volunteers",
          "A library of over 70,000 free eBooks, mostly older public-domain works.",
          _I.BOOK, _C.BOOK, "2023-02-15T10:00:00", 80),
    _link("5", "MIT OpenCourseWare", "https://ocw.mit.edu/", "MIT",
          "Nearly all MIT course content, open and available to the world.",
          _I.COURSE, _C.LEARNING, "2023-03-01T10:00:00", 88),
    _link("6", "Next.js Documentation", "https://nextjs.org/docs", "Vercel",
          "The official documentation for the Next.js React framework.",
          _I.WEBSITE, _C.WEBSITE, "2023-03-10T10:00:00", 92),
    _link("7", "Tailwind CSS", "https://tailwindcss.com/docs", "Tailwind Labs",
          "A utility-first CSS framework for rapid UI development.",
          _I.WEBSITE, _C.WEBSITE, "2023-04-01T10:00:00", 91),
    _link("8", "Shadcn/ui", "https://ui.shadcn.com/", None,
          "Well-designed components to copy and paste into your apps.",
          _I.WEBSITE, _C.WEBSITE, "2023-04-15T10:00:00", 93),
    _link("9", "Genkit GitHub Repository", "https://github.com/firebase/genkit", "Google",
          "Toolkit for building AI-powered applications.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-05-01T10:00:00", 89),
    _link("10", "Mozilla Developer Network (MDN)", "https://developer.mozilla.org/", "Mozilla",
          "Comprehensive documentation for web standards and technologies.",
          _I.BOOK, _C.WEBSITE, "2023-05-10T10:00:00", 94),
    _link("11", "React Official Website", "https://react.dev", "Meta",
          "The official site for React, a library for building user interfaces.",
          _I.WEBSITE, _C.WEBSITE, "2023-06-01T10:00:00", 87),
    _link("12", "VS Code GitHub Repository", "https://github.com/microsoft/vscode", "Microsoft",
          "Source of Visual Studio Code, a popular open-source code editor.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-06-15T10:00:00", 96),
    _link("13", "freeCodeCamp", "https://www.freecodecamp.org/", "freeCodeCamp.org",
          "Learn to code for free, build projects and earn certifications.",
          _I.COURSE, _C.LEARNING, "2023-07-01T10:00:00", 97),
    _link("14", "edX", "https://www.edx.org/", "2U",
          "Free online courses from leading institutions worldwide.",
          _I.COURSE, _C.LEARNING, "2023-07-10T10:00:00", 86),
    _link("15", "Coursera", "https://www.coursera.org/", "Coursera Inc.",
          "Courses, certificates and degrees from universities and companies.",
          _I.COURSE, _C.LEARNING, "2023-08-01T10:00:00", 84),
    _link("16", "The Pragmatic Programmer",
          "https://pragprog.com/titles/tpp20/the-pragmatic-programmer-20th-anniversary-edition/",
          "David Thomas, Andrew Hunt",
          "A classic book of practical advice on software development.",
          _I.BOOK, _C.BOOK, "2023-08-15T10:00:00", 78),
    _link("17", "CS50's Introduction to Computer Science",
          "https://www.youtube.com/watch?v=YoXxevp1WRQ", "Harvard University",
          "Harvard's introduction to computer science and programming.",
          _I.VIDEO, _C.YOUTUBE_VIDEO, "2023-09-01T10:00:00", 98),
    _link("18", "Crash Course Computer Science",
          "https://www.youtube.com/playlist?list=PL8dPuuaLjXtNlUrzyH5r6jN9ulIgZBpdo", "CrashCourse",
          "A playlist covering a wide range of computer science topics.",
          _I.PLAYLIST, _C.YOUTUBE_PLAYLIST, "2023-09-10T10:00:00", 99),
    _link("19", "TensorFlow GitHub Repository", "https://github.com/tensorflow/tensorflow", "Google",
          "An end-to-end open source platform for machine learning.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-10-01T10:00:00", 83),
    _link("20", "Linux Kernel GitHub Mirror", "https://github.com/torvalds/linux",
          "Linus Torvalds & Community",
          "The official mirror of the Linux kernel source tree.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-10-15T10:00:00", 82),
    _link("21", "Electron GitHub Repository", "https://github.com/electron/electron",
          "OpenJS Foundation",
          "Build cross-platform desktop apps with JavaScript, HTML and CSS.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-11-01T10:00:00", 79),
    _link("22", "Home Assistant Core GitHub", "https://github.com/home-assistant/core",
          "Home Assistant Community",
          "Open source home automation that puts local control and privacy first.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-11-10T10:00:00", 77),
    _link("23", "Godot Engine GitHub Repository", "https://github.com/godotengine/godot",
          "Godot Engine Community",
          "A cross-platform game engine for 2D and 3D games.",
          _I.REPOSITORY, _C.PROJECT_REPOSITORY, "2023-12-01T10:00:00", 76),
    _link("24", "EveryCircuit", "https://everycircuit.com/", "MuseMaze",
          "An online electronics simulator for designing and testing circuits.",
          _I.CIRCUIT, _C.WEBSITE, "2023-12-15T10:00:00", 70),
)


def seed_links(store: LinkStore, links: tuple[LinkRecord, ...] = SEED_LINKS) -> list[LinkRecord]:
    """
    Commits the starter links whose url is not stored yet. Safe to run repeatedly.
    """
    known = store.list_known_urls()
    missing = [link for link in links if link.url not in known]
    if not missing:
        return []
    stored = store.commit_batch(missing)
    logger.info("Seeded %d starter links", len(stored))
    return stored
