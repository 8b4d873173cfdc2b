from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from tqdm import tqdm

from steamid_codec.core.errors import SteamIdParseError
from steamid_codec.core.formatter import IdFormat
from steamid_codec.core.parser import parse
from steamid_codec.data.loader import load_inputs
from steamid_codec.engine.converter import Converter, OutputConfig
from steamid_codec.results.store import save_report


def _load_config(path: Optional[str]) -> OutputConfig:
    if not path:
        return OutputConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SystemExit(f"Missing config file: {path}")
    if data is not None and not isinstance(data, dict):
        raise SystemExit(f"Invalid config file (expected mapping): {path}")
    try:
        return OutputConfig.from_dict(data)
    except ValueError as e:
        raise SystemExit(f"Invalid config file {path}: {e}")


def cmd_convert(args: argparse.Namespace) -> int:
    if not args.ids:
        print("No IDs provided!")
        return 1

    converter = Converter(_load_config(args.config))
    for text in args.ids:
        for line in converter.render_lines(converter.convert(text)):
            print(line)
    print()
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    try:
        sid = parse(args.id)
    except SteamIdParseError as e:
        raise SystemExit(f'Unable to parse "{args.id}" reason: \'{e}\'')

    account_type = sid.account_type()
    instance = sid.instance()
    info = {
        "id": sid.id,
        "authentication_server": sid.authentication_server(),
        "account_number": sid.account_number(),
        "account_type": account_type.label,
        "account_type_char": account_type.to_char(),
        "chat_type": sid.chat_type().name.lower(),
        "instance": str(instance),
        "instance_value": instance.to_numeric(),
        "universe": sid.universe().label,
        "formats": {fmt.value: sid.format(fmt) for fmt in IdFormat},
    }
    print(json.dumps(info, ensure_ascii=False, indent=2))
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    cfg = _load_config(args.config)
    try:
        inputs = load_inputs(args.input)
    except FileNotFoundError:
        raise SystemExit(f"Missing input file: {args.input}")

    converter = Converter(cfg)
    records = []
    for text in tqdm(inputs, desc="Converting", unit="id", disable=args.no_progress):
        records.append(converter.convert(text).to_dict(cfg.formats))

    out_path = Path(args.out)
    summary = save_report(out_path, records)
    print(f"Wrote {out_path}")
    print(f"converted={summary.converted} failed={summary.failed}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="steamid", description="Convert Steam IDs between formats.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s_convert = sub.add_parser("convert", help="Print every configured format for each ID.")
    s_convert.add_argument("ids", nargs="*", help="SteamId64, SteamId2 or SteamId3 strings.")
    s_convert.add_argument("--config", default=None, help="Path to a config.yaml with an 'output' section.")
    s_convert.set_defaults(func=cmd_convert)

    s_inspect = sub.add_parser("inspect", help="Print the decoded fields of one ID as JSON.")
    s_inspect.add_argument("id", help="SteamId64, SteamId2 or SteamId3 string.")
    s_inspect.set_defaults(func=cmd_inspect)

    s_batch = sub.add_parser("batch", help="Convert IDs listed in a file and write a JSON report.")
    s_batch.add_argument("--input", required=True, help="Text file with one ID per line.")
    s_batch.add_argument("--out", default="results/steamids.json", help="Where to write the JSON report.")
    s_batch.add_argument("--config", default=None, help="Path to a config.yaml with an 'output' section.")
    s_batch.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    s_batch.set_defaults(func=cmd_batch)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
