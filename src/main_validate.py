from src.common import IOUtils, OpenTrackIOConfigurationError
from src.opentrackio import Sample, SampleLoader, ValidatorConfiguration
import argparse
import logging
import sys


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="OpenTrackIO sample validator")
    parser.add_argument("filepaths", nargs="+", help="Sample documents (JSON or hjson) to validate")
    parser.add_argument("--configuration", default=None, help="hjson validator configuration file")
    parser.add_argument("--output", default=None, help="Write a JSON report of parsed samples and diagnostics")
    args = parser.parse_args(argv)

    configuration: ValidatorConfiguration
    if args.configuration is None:
        configuration = ValidatorConfiguration()
    else:
        try:
            configuration = ValidatorConfiguration.from_file(args.configuration)
        except OpenTrackIOConfigurationError as e:
            print(e.message, file=sys.stderr)
            return 2
    logging.basicConfig(level=configuration.log_level_int())

    report: dict[str, dict] = dict()
    diagnostic_count: int = 0
    for filepath in args.filepaths:
        errors: list[str] = list()
        sample: Sample | None = SampleLoader.load(
            filepath=filepath,
            errors=errors,
            entity_labels=configuration.entities)
        print(f"{filepath}: {len(errors)} diagnostic(s)")
        for error in errors:
            print(f"    {error}")
        diagnostic_count += len(errors)
        report[filepath] = {
            "sample": sample.model_dump(mode="json", exclude_none=True) if sample is not None else None,
            "diagnostics": errors}

    if args.output is not None:
        if not IOUtils.json_write(
            filepath=args.output,
            json_dict=report,
            ignore_none=False,
            on_error_for_user=lambda msg: print(msg, file=sys.stderr),
            on_error_for_dev=logger.error
        ):
            return 2

    if diagnostic_count > 0 and configuration.fail_on_diagnostics:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
