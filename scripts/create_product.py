import sys, os, asyncio, argparse, json
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(ROOT)

from seller_api.backend.models import ProductDraft
from seller_api.services.product_service import (
    ProductValidationError,
    build_create_product_payload,
    submit_product,
)


async def main(path: str, dry_run: bool):
    with open(path, "r", encoding="utf-8") as f:
        draft = ProductDraft.model_validate(json.load(f))

    try:
        if dry_run:
            payload = build_create_product_payload(draft)
            print(json.dumps(payload.model_dump(mode="json"), indent=2, ensure_ascii=False))
            return
        result = await submit_product(draft)
    except ProductValidationError as e:
        for err in e.errors:
            print(f"❌ {err}")
        sys.exit(1)

    print(result)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a product from a draft JSON file")
    parser.add_argument("draft", help="path to the product draft JSON")
    parser.add_argument("--dry-run", action="store_true", help="print the payload instead of submitting")
    args = parser.parse_args()
    asyncio.run(main(args.draft, args.dry_run))
