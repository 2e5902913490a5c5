#!/usr/bin/env python3
"""
Single Product Extraction

Fetches one affiliate URL and prints the extracted details with a
review report. Provider is auto-detected from the URL.

Usage:
    python3 extract_single.py --url https://www.amazon.com/dp/B000000000
    python3 extract_single.py --url https://www.amazon.com/dp/B000000000 --verbose
    python3 extract_single.py --url https://www.amazon.com/dp/B000000000 --trace --quiet
    python3 extract_single.py --url https://us.shein.com/item-p-123.html --html saved_page.html
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

from product_fetcher.common import InvalidArgument, setup_logging
from product_fetcher.extraction import DetailsValidator, ProductDataFetcher
from product_fetcher.models import ProductDetails

load_dotenv(Path(__file__).parent / ".env")


def print_report(details: ProductDetails, validation: dict, url: str = ""):
    """Print detailed extraction report."""

    print("\n" + "="*80)
    print("EXTRACTION REPORT")
    print("="*80)

    print(f"\nProvider: {details.provider}")
    print(f"Affiliate URL: {url}")

    print("\n" + "-"*80)
    print("EXTRACTED DATA")
    print("-"*80 + "\n")

    description = details.description or ""
    fields = [
        ("Name", "name", details.name),
        ("Price", "price", str(details.price)),
        ("Image", "image_url", details.image_url),
        ("Description", "description",
         f"{description[:70]}..." if len(description) > 70 else description),
    ]

    for label, key, value in fields:
        status = validation["fields"][key]
        print(f"  [{status:6}] {label:15} {value or 'MISSING'}")

    if validation["warnings"]:
        print("\nNEEDS MANUAL CORRECTION:")
        for warning in validation["warnings"]:
            print(f"  - {warning}")
    else:
        print("\nNo issues found!")

    print("\n" + "="*80)


def main():
    parser = argparse.ArgumentParser(
        description="Extract a single product with review report"
    )
    parser.add_argument(
        "--url",
        required=True,
        help="Affiliate or product URL"
    )
    parser.add_argument(
        "--html",
        help="Use a saved HTML file instead of fetching the URL"
    )
    parser.add_argument(
        "--output-json",
        help="Write the extracted details and report to this JSON file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging for fetch and extraction steps"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every extraction rule attempt (rule id, matches, accepted value)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet, trace=args.trace)

    try:
        pipeline = ProductDataFetcher()
        if args.html:
            html = Path(args.html).read_text(encoding="utf-8", errors="replace")
            details = pipeline.extract_from_html(args.url, html)
        else:
            details = pipeline.fetch_and_extract(args.url)
    except InvalidArgument as e:
        print(f"\nError: {e}")
        sys.exit(1)

    validation = DetailsValidator(details).validate()
    print_report(details, validation, args.url)

    if args.output_json:
        output_data = {
            "url": args.url,
            "details": asdict(details),
            "validation": validation,
        }
        os.makedirs(os.path.dirname(args.output_json) or ".", exist_ok=True)
        with open(args.output_json, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False, default=str)
        print(f"\nResults saved to: {args.output_json}")

    # Exit code
    sys.exit(1 if validation["needs_review"] else 0)


if __name__ == "__main__":
    main()
