"""
Page registry for the Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.data import render_data_page
from app.pages.progress import render_progress_page
from app.pages.study import render_study_page


@dataclass(frozen=True)
class AppPage:
    title: str
    icon: str
    render: Callable[[], None]

    @property
    def label(self) -> str:
        return f"{self.icon} {self.title}"


PAGES = [
    AppPage(title="Study", icon="📝", render=render_study_page),
    AppPage(title="Progress", icon="📈", render=render_progress_page),
    AppPage(title="Data", icon="🗂️", render=render_data_page),
]
