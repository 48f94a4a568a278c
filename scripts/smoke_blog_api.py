#!/usr/bin/env python3
"""Blog API integration smoke test.

Lists posts and reads statistics against a real blog API. With --create it
also submits one post and lists again to show it.

Usage:
    uv run python scripts/smoke_blog_api.py https://example.com/blog/index.php [--create]
"""

import argparse
import sys
from datetime import datetime, timezone

from blog_assistant.blog_client import BlogApiClient
from blog_assistant.models import NewBlogPostRequest


def _list_posts(client: BlogApiClient) -> bool:
    response = client.fetch_all_posts()
    if response is None:
        print("   ❌ List failed (see log for status code)\n")
        return False
    print(f"   Posts: {len(response.posts)}")
    for post in response.posts[:5]:
        print(f"     {post.id}: {post.title} by {post.author} ({post.created_at})")
    print(f"   Meta: {response.meta or '(none)'}")
    print("   ✅ Posts listed\n")
    return True


def main(base_url: str, create: bool) -> int:
    print("=== Blog API Smoke Test ===")
    print(f"URL: {base_url}\n")

    ok = True
    with BlogApiClient(base_url) as client:
        print("1. Listing posts...")
        ok &= _list_posts(client)

        print("2. Fetching statistics...")
        stats = client.fetch_statistics()
        if stats is None:
            print("   ❌ Statistics failed (see log for status code)\n")
            ok = False
        else:
            print(f"   {stats.total_posts}/{stats.max_posts} used ({stats.percentage_used:.2f}%)")
            print("   ✅ Statistics fetched\n")

        if create:
            stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
            print("3. Creating a post...")
            created = client.create_post(
                NewBlogPostRequest(
                    title=f"Smoke test {stamp}",
                    content="Created by scripts/smoke_blog_api.py",
                    author="smoke-test",
                )
            )
            print("   ✅ Post created\n" if created else "   ❌ Create failed\n")
            ok &= created

            print("4. Listing posts again...")
            ok &= _list_posts(client)

    print("=== Done ===" if ok else "=== Finished with failures ===")
    return 0 if ok else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Smoke test a live blog API.")
    parser.add_argument("base_url", help="Blog API URL, e.g. https://example.com/blog/index.php")
    parser.add_argument("--create", action="store_true", help="Also create one post")
    args = parser.parse_args()
    sys.exit(main(args.base_url, args.create))
