"""Interactive text menu over the blog API client."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from blog_assistant.blog_client import BlogApiClientProtocol, BlogApiError
from blog_assistant.models import NewBlogPostRequest

log = structlog.get_logger()

MENU = """
--- Menu ---
1. Create new blog
2. View all blogs
3. Statistics of the site
4. Back"""

CHOICE_CREATE = 1
CHOICE_LIST = 2
CHOICE_STATS = 3
CHOICE_EXIT = 4


class BlogConsole:
    """Menu loop that turns user choices into blog API calls."""

    def __init__(
        self,
        client: BlogApiClientProtocol,
        bot_name: str,
        *,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self._client = client
        self._bot_name = bot_name
        self._input = input_func
        self._output = output

    def run(self) -> None:
        """Greet the user and process menu choices until exit or end of input."""
        self._output(f"Hello! I am {self._bot_name}, your blog assistant.")
        while True:
            self._output(MENU)
            try:
                raw = self._input("Please choose: ")
            except EOFError:
                self._farewell()
                return

            try:
                choice = int(raw.strip())
            except ValueError:
                self._output("Incorrect character, please enter valid number")
                continue

            if choice == CHOICE_EXIT:
                self._farewell()
                return

            try:
                self._dispatch(choice)
            except EOFError:
                self._farewell()
                return
            except BlogApiError as exc:
                log.info("menu_action_failed", choice=choice, error=str(exc))
                self._output(f"Mistake: {exc}")

    def _dispatch(self, choice: int) -> None:
        if choice == CHOICE_CREATE:
            self.create_post()
        elif choice == CHOICE_LIST:
            self.show_posts()
        elif choice == CHOICE_STATS:
            self.show_statistics()
        else:
            self._output("Incorrect choice, please try again.")

    def create_post(self) -> None:
        """Prompt for a post and submit it. Blank fields are rejected locally."""
        self._output("\n--- Create new blog ---")
        title = self._input("Please enter the name: ")
        author = self._input("Please enter the author: ")
        content = self._input("Please enter the content: ")

        if not title.strip() or not author.strip() or not content.strip():
            self._output("Error: name, author and content can not be empty.")
            return

        request = NewBlogPostRequest(title=title, content=content, author=author)
        if self._client.create_post(request):
            self._output("Blog post created successfully!")
        else:
            self._output("Error: blog post could not be created.")

    def show_posts(self) -> None:
        self._output("\n--- See all blogs ---")
        response = self._client.fetch_all_posts()
        if response is None or not response.posts:
            self._output("No blogs for now.")
            return

        for post in response.posts:
            self._output(str(post))
        if response.meta is not None:
            self._output(f"Meta information: {response.meta}")

    def show_statistics(self) -> None:
        self._output("\n--- Statistics ---")
        stats = self._client.fetch_statistics()
        if stats is None:
            self._output("Error loading statistics.")
            return
        self._output(str(stats))

    def _farewell(self) -> None:
        self._output(f"Thanks for using {self._bot_name}. Bye!")
