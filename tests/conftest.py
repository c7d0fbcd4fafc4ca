"""Test configuration and fixtures for the blog theme application."""

from datetime import datetime, timezone
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from blogtheme import create_app
from blogtheme.extensions import db
from blogtheme.models import Category
from blogtheme.repositories.blog import create_category, upsert_post
from blogtheme.schemas.render import PostCard


@pytest.fixture
def app_config() -> dict:
    return {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'SITE_NAME': 'Test Blog',
        'BASEURL': '',
        'SHOW_EXCERPTS': True,
        'PAGINATE': 2,
        'PAGINATE_CATEGORIES': False,
        'SUBSCRIBE_URL': 'https://example.com/subscribe',
        'TWITTER_USERNAME': 'testblog',
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
        'CACHE_TYPE': 'NullCache',
    }


@pytest.fixture
def app(app_config: dict) -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    app = create_app(app_config)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def categories(app: Flask) -> list[Category]:
    """Angular, Python and DevOps, in that display order."""
    return [
        create_category(name='Angular', description='Front-end work', display_order=1),
        create_category(name='Python', display_order=2),
        create_category(name='DevOps', display_order=3),
    ]


@pytest.fixture
def posts(app: Flask, categories: list[Category]):
    """Three Angular posts (one also in DevOps) and one Python post."""
    return [
        upsert_post(
            title='Angular one',
            slug='angular-one',
            date=datetime(2024, 1, 10, tzinfo=timezone.utc),
            categories=['Angular'],
            excerpt='First *Angular* article.',
            description='Getting started',
            cover='/assets/img/angular-one.png',
        ),
        upsert_post(
            title='Angular two',
            slug='angular-two',
            date=datetime(2024, 2, 10, tzinfo=timezone.utc),
            categories=['Angular', 'DevOps'],
            excerpt='Second Angular article.',
            description='Deploying Angular',
            cover='/assets/img/angular-two.png',
        ),
        upsert_post(
            title='Angular three',
            slug='angular-three',
            date=datetime(2024, 3, 10, tzinfo=timezone.utc),
            categories=['Angular'],
            excerpt='Third Angular article.',
            description='Signals',
        ),
        upsert_post(
            title='Python one',
            slug='python-one',
            date=datetime(2024, 1, 5, tzinfo=timezone.utc),
            categories=['Python'],
            excerpt='A Python article.',
            description='Typing',
        ),
    ]


def make_card(title: str, day: int = 1, categories=('Angular',), **kwargs) -> PostCard:
    """Build a PostCard without touching the database."""
    slug = title.lower().replace(' ', '-')
    return PostCard(
        title=title,
        url=f'/2024/01/{day:02d}/{slug}.html',
        date=datetime(2024, 1, day, tzinfo=timezone.utc),
        excerpt=kwargs.get('excerpt', f'{title} excerpt'),
        description=kwargs.get('description', f'{title} description'),
        cover=kwargs.get('cover', ''),
        categories=categories,
    )


@pytest.fixture
def card_factory():
    return make_card
