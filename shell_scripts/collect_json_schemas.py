#!/usr/bin/env python3

import json
from pathlib import Path

from pydantic.json_schema import model_json_schema
from pwd_policy import dto
from pwd_policy._conf import Settings


def execute(output_dir: str) -> list[Path]:
    generated = []
    for filename, builder in {
        Path(output_dir) / "policy.json": dto.PolicyConfiguration,
        Path(output_dir) / "configuration.json": Settings,
    }.items():
        filename.write_text(
            json.dumps(model_json_schema(builder, by_alias=True), indent=2)
        )
        print("generated", filename)
        generated.append(filename)
    return generated


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(
        prog="collect_json_schemas",
        description="Writes JSON schemas of the policy and the configuration file.",
    )
    parser.add_argument("output_dir")
    args = parser.parse_args()

    execute(output_dir=args.output_dir)
