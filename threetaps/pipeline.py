# threetaps/pipeline.py
import logging
import os

from dotenv import load_dotenv

from .client import ThreeTapsClient
from .config import load_settings
from .errors import ThreeTapsError
from .exporters import ensure_dir, export_results_csv


def prompt(label: str) -> str:
    return input(label).strip()


def run():
    load_dotenv()
    logging.basicConfig(level=os.getenv("THREETAPS_LOG_LEVEL", "WARNING"))

    settings = load_settings()
    client = ThreeTapsClient.from_settings(settings)

    print("\n=== 3taps Search Export ===\n")
    location = prompt("Location code(s) (example: 'LAX' or 'LAX+OR+NYC', blank for any): ")
    category = prompt("Category code(s) (example: 'VAUT', blank for any): ")
    text = prompt("Text to look for in heading or body (blank for none): ")
    rpp = prompt("Results to fetch (example: 50, -1 for all): ") or "10"

    params = {
        "location": location or None,
        "category": category or None,
        "text": text or None,
    }

    try:
        count = client.count(**params)
        print(f"\nMatching postings: {count.get('count')}")

        result = client.search(rpp=rpp, **params)
    except ThreeTapsError as e:
        print(f"\nSearch failed: {e}")
        return

    if not result.get("success", True):
        print(f"\nSearch failed: {result.get('error')}")
        return

    ensure_dir(settings.data_processed_dir)
    out_csv = os.path.join(settings.data_processed_dir, "postings.csv")
    df = export_results_csv(result, out_csv)

    print(f"Fetched {len(df)} postings in {result.get('execTimeMs')} ms.\n")
    print("✅ Export complete:")
    print(f" - {out_csv}")


if __name__ == "__main__":
    run()
