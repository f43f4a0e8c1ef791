#!/usr/bin/env python3

import sys
import json
import sqlite3
from uuid import UUID

from pydantic import ValidationError

from config import get_seed_file
from logger import get_logger
from models.page import PageRequest
from schemas.category import CreateCategoryRequest
from services.errors import CategoryNotFoundError

logger = get_logger()


def _log_category(category, indent=""):
    logger.info(f"{indent}UUID: {category.uuid}")
    logger.info(f"{indent}Name: {category.name}")
    if category.description:
        logger.info(f"{indent}Description: {category.description}")


def _build_request(args):
    try:
        return CreateCategoryRequest(name=args.name, description=args.description)
    except ValidationError as e:
        for error in e.errors():
            logger.error(f"Invalid {'.'.join(map(str, error['loc']))}: {error['msg']}")
        sys.exit(1)


def cmd_list(args, services):
    """List one page of categories."""
    size = args.size
    if size is None:
        size = services.config.default_page_size
    try:
        page_request = PageRequest.of(args.page, size)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    page = services.categories.find_all(page_request)

    if page.total_elements == 0:
        logger.info("No categories found.")
        return

    if not page.content:
        logger.info(f"Page {page.number} is empty ({page.total_pages} page(s) total).")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in page:
        _log_category(category)
        logger.info("-" * 80)

    logger.info(
        f"\nPage {page.number + 1} of {page.total_pages} "
        f"({page.number_of_elements} shown, {page.total_elements} total)"
    )
    if page.has_next:
        logger.info(f"Next page: --page {page.request.next().page} --size {page.size}")


def cmd_show(args, services):
    """Show a single category looked up by uuid, name or description."""
    try:
        if args.uuid is not None:
            category = services.categories.find_by_uuid(args.uuid)
        elif args.name is not None:
            category = services.categories.find_by_name(args.name)
        else:
            category = services.categories.find_by_description(args.description)
    except CategoryNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)

    _log_category(category)


def cmd_create(args, services):
    """Create a new category."""
    payload = _build_request(args)

    try:
        category = services.categories.save(payload)
    except sqlite3.IntegrityError:
        logger.error(f"A category named '{payload.name}' already exists.")
        sys.exit(1)

    logger.info(f"\n✓ Category created successfully with UUID: {category.uuid}")
    _log_category(category, indent="  ")


def cmd_update(args, services):
    """Overwrite name and description of a category."""
    payload = _build_request(args)

    try:
        category = services.categories.update(payload, args.uuid)
    except CategoryNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except sqlite3.IntegrityError:
        logger.error(f"A category named '{payload.name}' already exists.")
        sys.exit(1)

    logger.info("✓ Category updated.")
    _log_category(category, indent="  ")


def cmd_delete(args, services):
    """Delete a category by UUID."""
    try:
        category = services.categories.find_by_uuid(args.uuid)
    except CategoryNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info("\nCategory to delete:")
    _log_category(category, indent="  ")

    if not args.yes:
        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    services.categories.delete_by_uuid(args.uuid)
    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def cmd_seed(args, services):
    """Seed categories from the bundled JSON file."""
    seed_file = get_seed_file()

    if not seed_file.exists():
        logger.error(f"Seed file not found: {seed_file}")
        sys.exit(1)

    try:
        with open(seed_file, "r") as f:
            categories_data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON file: {e}")
        sys.exit(1)

    logger.info(f"\nSeeding categories from {seed_file.name}")
    logger.info("=" * 80)

    created_count = 0
    skipped_count = 0

    for category_data in categories_data:
        try:
            payload = CreateCategoryRequest(**category_data)
        except ValidationError:
            logger.warning(f"Skipping invalid seed entry: {category_data}")
            continue

        try:
            services.categories.find_by_name(payload.name)
            logger.info(f"⊘ Skipped '{payload.name}' (already exists)")
            skipped_count += 1
            continue
        except CategoryNotFoundError:
            pass

        category = services.categories.save(payload)
        logger.info(f"✓ Created '{category.name}' ({category.uuid})")
        created_count += 1

    logger.info("=" * 80)
    logger.info("\nSeeding complete!")
    logger.info(f"Created: {created_count}")
    logger.info(f"Skipped: {skipped_count}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, update and delete book categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser(
        "list", help="List categories page by page"
    )
    list_parser.add_argument(
        "--page", type=int, default=0, help="Zero-based page number (default: 0)"
    )
    list_parser.add_argument(
        "--size", type=int, default=None, help="Page size (default: from config)"
    )
    list_parser.set_defaults(func=cmd_list)

    # categories show
    show_parser = categories_subparsers.add_parser(
        "show", help="Show a category by uuid, name or description"
    )
    lookup = show_parser.add_mutually_exclusive_group(required=True)
    lookup.add_argument("--uuid", type=UUID, help="Category UUID")
    lookup.add_argument("--name", help="Exact category name")
    lookup.add_argument("--description", help="Exact category description")
    show_parser.set_defaults(func=cmd_show)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument("--name", required=True, help="Category name")
    create_parser.add_argument("--description", help="Category description")
    create_parser.set_defaults(func=cmd_create)

    # categories update
    update_parser = categories_subparsers.add_parser(
        "update", help="Overwrite name and description of a category"
    )
    update_parser.add_argument("uuid", type=UUID, help="UUID of the category")
    update_parser.add_argument("--name", required=True, help="New category name")
    update_parser.add_argument("--description", help="New category description")
    update_parser.set_defaults(func=cmd_update)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by UUID"
    )
    delete_parser.add_argument("uuid", type=UUID, help="UUID of the category")
    delete_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)

    # categories seed
    seed_parser = categories_subparsers.add_parser(
        "seed", help="Seed categories from the bundled JSON file"
    )
    seed_parser.set_defaults(func=cmd_seed)
