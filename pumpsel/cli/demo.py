# cli/demo.py   (внешний скрипт запуска)

import argparse
import logging
import sys

from pumpsel import InvalidInputError, OperatingPointQuery, PumpSelector, PumpSelectorError
from pumpsel.facade.messages import format_verdict


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Pump curve selector demo")
    parser.add_argument("--pump", default="BC-21 R 1/2 (3 CV)", help="pump name")
    parser.add_argument("--flow", type=float, help="flow, m³/h")
    parser.add_argument("--head", type=float, help="head, m")
    parser.add_argument("--lang", default="en", choices=("en", "pt"))
    parser.add_argument("--list", action="store_true", help="list catalog and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    selector = PumpSelector()
    if args.list:
        for name in selector.list_pump_names():
            print(name)
        return 0

    try:
        spec = selector.pump_info(args.pump)
        print(
            f"{spec.name}: {spec.rated_power_cv} CV, {spec.rated_rpm} rpm, "
            f"NPSH {spec.rated_npsh_m} m, η {spec.rated_efficiency_percent} %"
        )
        if args.flow is None:
            print(selector.curves_frame(args.pump))
            return 0

        result = selector.resolve(OperatingPointQuery(args.pump, args.flow, args.head))
    except InvalidInputError as exc:
        print("\n".join(format_verdict(exc.verdict, args.lang)), file=sys.stderr)
        return 1
    except PumpSelectorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Q = {result.flow:.2f} m³/h")
    if result.user_head is not None:
        print(f"H specified = {result.user_head:.2f} m")
    print(f"H curve = {result.resolved_head:.2f} m")
    print(f"N = {result.power:.3f} CV")
    print(f"η = {result.efficiency:.2f} %")
    print(f"NPSH = {result.npsh:.2f} m")
    for line in format_verdict(result.verdict, args.lang):
        print(f"! {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
