"""Build the site's Svelte pages from data/. Runs from a checkout or an install."""
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from content_pipeline import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(ROOT))
