from typing import Callable, Dict, Iterable, List

from .eml_to_comment import parse_mail
from .models import Comment


Groups = Dict[str, List[Comment]]


def group_comments(comments: Iterable[Comment]) -> Groups:
    """Group comments by page URL, keeping input order within each page.

    URLs are compared exactly. Comments sharing an ID are all kept.
    """
    groups: Groups = {}
    for comment in comments:
        groups.setdefault(comment.url, []).append(comment)
    return groups


def merge_groups(*groups: Groups) -> Groups:
    merged: Groups = {}
    for group in groups:
        for url, comments in group.items():
            merged.setdefault(url, []).extend(comments)
    return merged


def collect_comments(paths: Iterable, parse: Callable = parse_mail) -> Groups:
    """Parse every mail in paths and group the comments by page URL.

    The first file that fails to parse stops the collection.
    """
    return group_comments(parse(path) for path in paths)


def sort_key(comment: Comment):
    return comment.time, comment.id


def sort_comments(comments: Iterable[Comment]) -> List[Comment]:
    # Ordering by ID too keeps comments with the same timestamp stable
    # from run to run.
    return sorted(comments, key=sort_key)


def sorted_groups(groups: Groups) -> Groups:
    return {url: sort_comments(groups[url]) for url in sorted(groups)}
