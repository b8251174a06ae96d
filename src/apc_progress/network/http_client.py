import random

import requests


USER_AGENTS = [
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36',
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/16.4 Safari/605.1.15',
    'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/118.0.5993.70 Safari/537.36',
]

SESSION_ORIGIN = 'https://apclassroom.collegeboard.org'
SESSION_REFERER = SESSION_ORIGIN + '/'
SESSION_USER_AGENT = random.choice(USER_AGENTS)


def create_session(bearer_token: str) -> requests.Session:
    """Build the single authenticated session shared by every API client of a run."""
    session = requests.Session()
    session.trust_env = False
    session.headers.update({
        'User-Agent': SESSION_USER_AGENT,
        'Content-Type': 'application/json',
        'Accept': 'application/json',
        'Origin': SESSION_ORIGIN,
        'Referer': SESSION_REFERER,
        'Authorization': f'Bearer {bearer_token}',
    })
    return session


__all__ = [
    "create_session",
    "SESSION_USER_AGENT",
    "SESSION_REFERER",
]
