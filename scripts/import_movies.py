import argparse
import re
import sys
from typing import List, Tuple

import pandas as pd
import requests

YEAR_SUFFIX = re.compile(r"^(?P<title>.*?)\s*\((?P<year>\d{4})\)\s*$")


def split_title(raw_title: str) -> Tuple[str, int]:
    """Split a MovieLens title such as ``Toy Story (1995)`` into title and year."""
    match = YEAR_SUFFIX.match(raw_title)
    if not match:
        return raw_title.strip(), 0
    return match.group("title"), int(match.group("year"))


def read_movies(path: str) -> List[dict]:
    df = pd.read_csv(
        path, sep="::", header=None, engine="python", encoding="latin-1", names=["movie_id", "title", "genres"]
    )
    df["genres"] = df["genres"].fillna("").apply(lambda g: g.split("|") if g else [])
    payloads = []
    for row in df[["title", "genres"]].to_dict(orient="records"):
        title, year = split_title(row["title"])
        payloads.append({"title": title, "yearOfRelease": year, "genres": row["genres"]})
    return payloads


def insert_movies(base_url: str, movies: List[dict], dry_run: bool, limit: int, timeout: float) -> int:
    url = base_url.rstrip("/") + "/movies/"
    count = 0
    for payload in movies:
        if limit and count >= limit:
            break
        if dry_run:
            count += 1
            continue
        try:
            r = requests.post(url, json=payload, timeout=timeout)
            r.raise_for_status()
            count += 1
        except requests.RequestException as e:
            print(f"Failed to insert movie {payload['title']!r}: {e}", file=sys.stderr)
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Import MovieLens movies into FilmBase")
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--movies_path", type=str, default="data/ml-1m/movies.dat")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_movies(args.movies_path)
    except (OSError, pd.errors.ParserError) as e:
        print(f"Failed to read movies: {e}", file=sys.stderr)
        sys.exit(1)
    inserted = insert_movies(args.base_url, rows, args.dry_run, args.limit, args.timeout)
    print(f"Inserted {inserted} movies")


if __name__ == "__main__":
    main()
