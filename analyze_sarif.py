#!/usr/bin/env python3
"""
SARIF Code Flow Viewer - command line facade
"""

import contextlib
import json
import sys
from sarif_flows import SarifAnalyzer
from sarif_flows.formatters import format_code_flows
from sarif_flows.web import prepare_results


def main():
    import argparse
    parser = argparse.ArgumentParser(
        description='Convert the code flows of a SARIF log into navigable step trees.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_sarif.py results.sarif
  python analyze_sarif.py results.sarif --source-root ./checkout
  python analyze_sarif.py results.sarif --json -o code_flows.json
  python analyze_sarif.py results.sarif --remap-root /mnt/other-checkout
        """
    )
    parser.add_argument('input_file', help='Path to the SARIF file')
    parser.add_argument('-o', '--output', dest='output_file', default=None,
                       help='Write output to this file instead of stdout')
    parser.add_argument('--source-root', default=None,
                       help='Directory relative artifact URIs are resolved against (default: cwd)')
    parser.add_argument('--remap-root', default=None,
                       help='Second source root tried for locations that could not be mapped')
    parser.add_argument('--json', action='store_true', help='Emit JSON instead of a text tree')
    args = parser.parse_args()

    analyzer = SarifAnalyzer(source_root=args.source_root)

    try:
        print(f"\nConfiguration:", file=sys.stderr)
        print(f"  Input file: {args.input_file}", file=sys.stderr)
        print(f"  Source root: {analyzer.config.source_root}", file=sys.stderr)
        print(f"  Remap root: {args.remap_root}\n", file=sys.stderr)

        # Progress lines go to stderr, stdout only carries the tree or JSON
        with contextlib.redirect_stdout(sys.stderr):
            analyzer.process_sarif_file(args.input_file)
            if args.remap_root:
                remapped = analyzer.remap_results(source_root=args.remap_root)
                print(f"Remapped {remapped} steps using {args.remap_root}")

        if args.json:
            output = json.dumps(prepare_results(analyzer), indent=2)
        else:
            blocks = []
            for result in analyzer.results:
                title = f"{result['rule_id'] or 'unknown-rule'}: {result['message'] or ''}"
                blocks.append(format_code_flows(result['code_flows'], title=title))
            output = '\n\n'.join(blocks)

        if args.output_file:
            with open(args.output_file, 'w') as f:
                f.write(output)
        else:
            print(output)
        print(f"\n✓ Analysis complete!", file=sys.stderr)
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
