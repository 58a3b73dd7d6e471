#!/usr/bin/env python3
"""
Quick verification that the AAC board works end-to-end.
"""
import logging
import sys
import tempfile
from pathlib import Path

from pkg.aac.board import AACBoard
from pkg.aac.config import BoardConfig
from pkg.aac.errors import ImageNotFound

SAMPLE_BOARD = Path(__file__).parent / "data" / "sample_board.txt"


def main(board_path: str = str(SAMPLE_BOARD)) -> int:
    cfg = BoardConfig.load()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s [verify_board] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    print("=" * 60)
    print("AAC Board Verification")
    print("=" * 60)

    print(f"\n[1/5] Loading {board_path}...")
    board = AACBoard(board_path, config=cfg)
    if board.load_error:
        print(f"❌ Load failed: {board.load_error}")
        return 1
    print(f"✅ {len(board.categories)} categories")
    for key, name in board.category_names().items():
        print(f"   {key} → {name}")

    print("\n[2/5] Opening first category...")
    home_images = board.get_image_locs()
    if not home_images:
        print("❌ Board has no categories")
        return 1
    if board.select(home_images[0]) != "":
        print("❌ Selecting a category image returned text")
        return 1
    print(f"✅ In category: {board.get_category()}")

    print("\n[3/5] Selecting every item...")
    for image_loc in board.get_image_locs():
        print(f"   {image_loc} → {board.select(image_loc)!r}")

    print("\n[4/5] Unknown image...")
    try:
        board.select("img/does-not-exist.png")
        print("❌ Expected ImageNotFound")
        return 1
    except ImageNotFound as e:
        print(f"✅ {e}")
    board.reset()

    print("\n[5/5] Write and reload...")
    with tempfile.TemporaryDirectory() as tmp:
        out = str(Path(tmp) / "board.txt")
        board.write_to_file(out)
        reloaded = AACBoard(out, config=cfg)
        if reloaded.category_names() != board.category_names():
            print("❌ Categories differ after reload")
            return 1
        for key in board.categories:
            if reloaded.categories[key].items != board.categories[key].items:
                print(f"❌ Items differ for {key}")
                return 1
    print("✅ Round trip preserved categories and items")

    print("\n" + "=" * 60)
    print("✅ ALL CHECKS PASSED")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
