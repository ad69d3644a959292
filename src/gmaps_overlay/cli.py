# cli.py
import argparse
import logging
import sys
from pathlib import Path

import jsonschema

from .config import load_json
from .core.errors import InvalidResource
from .model.loader import MapLoader


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gmaps-overlay",
                                description="Render Google Maps initialization code from a map JSON")
    p.add_argument("--config", required=True, help="地図/アイコン/マーカーをまとめたJSONファイル")
    p.add_argument("--format", choices=["js", "json"], default="js")
    p.add_argument("--function-name", default="initMap", help="生成する JavaScript 関数名")
    p.add_argument("--element-id", default=None, help="map.element_id を上書き")
    p.add_argument("--zoom", type=int, default=None, help="zoom を固定（未指定なら自動）")
    p.add_argument("--no-validate", action="store_true", help="JSON Schema 検証をしない")
    p.add_argument("--log-level", default="WARNING")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    loader = MapLoader(validate_schema=not args.no_validate)
    try:
        data = load_json(args.config)
        # JSONをデフォルトに、CLIで上書き
        map_section = dict(data.get("map", {}))
        if args.element_id is not None: map_section["element_id"] = args.element_id
        if args.zoom is not None: map_section["zoom"] = args.zoom
        data["map"] = map_section
        gmap = loader.build(data, base_dir=Path(args.config).resolve().parent)
    except (InvalidResource, FileNotFoundError, jsonschema.ValidationError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(gmap.to_json(indent=2))
    else:
        print(gmap.to_js(function_name=args.function_name), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
