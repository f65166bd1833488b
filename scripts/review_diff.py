import sys
import os
import json

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from app.diff.errors import ParseError
from app.review.pipeline import review


def review_diff() -> None:
    """
    argv[0] -- script name
    argv[1] -- path to the diff file, `-` to read it from stdin
    """

    if len(sys.argv) < 2 or sys.argv[1] == "-":
        diff_text = sys.stdin.read()
    else:
        with open(sys.argv[1], "r", encoding="utf-8") as diff_file:
            diff_text = diff_file.read()

    try:
        result = review(diff_text)
    except ParseError as e:
        print(f"Could not parse diff: {e.message}\n\n{e.block}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result.to_json_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    review_diff()
