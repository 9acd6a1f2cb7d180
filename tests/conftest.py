import pytest

from lwcsearch import Article


@pytest.fixture
def lwc_articles():
    return [
        {"title": "Intro to LWC", "desc": "basics", "tags": ["beginner"]},
        {"title": "Advanced Patterns", "desc": "LWC deep dive", "tags": ["advanced", "lwc"]},
    ]


@pytest.fixture
def articles():
    return [
        Article("Lifecycle Hooks", "connectedCallback and renderedCallback", ["lifecycle"]),
        Article("Wire Adapters", "Reactive data with @wire", ["wire", "data"]),
        Article("Jest Testing", "Mock wire adapters in unit tests", ["testing"]),
        Article("Styling Hooks", "CSS custom properties", ["css"]),
    ]
