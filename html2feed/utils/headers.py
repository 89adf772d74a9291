"""Browser-like request headers for fetching source pages."""

import random


class UserAgentRotator:
    """Pool of realistic desktop user agents.

    Attributes:
        USER_AGENTS: User agents to choose from

    """

    USER_AGENTS = [
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:128.0) Gecko/20100101 Firefox/128.0',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 14.5; rv:128.0) Gecko/20100101 Firefox/128.0',
        'Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36',
        'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36',
    ]

    @classmethod
    def get_random(cls) -> str:
        """Get a random user agent."""
        return random.choice(cls.USER_AGENTS)


def generate_headers(user_agent: str | None = None) -> dict[str, str]:
    """Build request headers for an HTML page.

    Args:
        user_agent: Fixed user agent, or None to pick one at random

    Returns:
        Header dict for requests.

    """
    return {
        'User-Agent': user_agent or UserAgentRotator.get_random(),
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.9',
        'Accept-Encoding': 'gzip, deflate',
    }
