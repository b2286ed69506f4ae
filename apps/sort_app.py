import json
import sys

from pathlib import Path
from tclogger import TCLogger, logstr

from apps.arg_parser import ArgParser
from configs.envs import SORT_APP_ENVS
from sorters import classify, sort_results

logger = TCLogger()


class SortApp:
    def __init__(self, app_envs: dict = {}):
        self.title = app_envs.get("app_name")
        self.version = app_envs.get("version")

    def load_results(self, input_path: str) -> list[dict]:
        if input_path == "-":
            text = sys.stdin.read()
        else:
            text = Path(input_path).read_text(encoding="utf-8")
        results = json.loads(text)
        if not isinstance(results, list):
            raise ValueError(f"expected a list of results, got {type(results).__name__}")
        return results

    def explain(self, results: list[dict]):
        logger.note(f"> Bands:")
        for idx, result in enumerate(results):
            band = classify(result)
            name = result.get("name") or result.get("layer")
            logger.mesg(f"  [{idx}] {logstr.okay(band)}: {name}")

    def run(self, argv: list[str] = None) -> int:
        arg_parser = ArgParser(argv=argv)
        args = arg_parser.args
        try:
            results = self.load_results(args.input)
        except (OSError, ValueError) as e:
            logger.fail(f"× Failed to load results from {args.input}: {e}")
            return 1

        strict_ties = False if args.loose_ties else None
        sorted_results = sort_results(
            results, arg_parser.get_clean(), strict_ties=strict_ties
        )
        if args.explain:
            self.explain(sorted_results)
        output = json.dumps(sorted_results, ensure_ascii=False, indent=2)
        if args.output:
            Path(args.output).write_text(output, encoding="utf-8")
            logger.file(f"  * dumped to: {args.output}")
        else:
            print(output)
        logger.success(f"> {self.title} - v{self.version}: {len(sorted_results)} results")
        return 0


def main():
    app = SortApp(SORT_APP_ENVS)
    sys.exit(app.run())


if __name__ == "__main__":
    main()

    # python -m apps.sort_app -i results.json --focus-lat 40.7 --focus-lon -74.0 -e
