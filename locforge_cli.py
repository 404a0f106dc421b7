import sys
import argparse
import logging

import locforge_config as config
from locforge_enums import Language
from locforge_exceptions import ConfigurationError, LocForgeError
from locforge_logger import get_logger, set_console_level
from locforge_settings import load_settings

logger = get_logger("main")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="locforge",
        description="Scan UI content for strings, key and translate them (LocForge).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    parser.add_argument("--data", help="Path of the localization dataset (overrides settings).")
    parser.add_argument("--engine", help="Translation engine id (overrides settings).")
    parser.add_argument("-tl", "--target-lang", action="append", dest="target_languages",
                        help="Target language code; repeat for several (overrides settings).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output.")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create the dataset file if it does not exist.")

    p = sub.add_parser("scan-scene", help="List scene texts that are not keys yet.")
    p.add_argument("scenes", nargs="+", help="Scene document(s) (.json).")

    p = sub.add_parser("scan-scripts", help="List string literals found in source files.")
    p.add_argument("root", nargs="?", default=config.DEFAULT_SCRIPTS_SUBDIR,
                   help="Directory to scan recursively.")

    p = sub.add_parser("translate", help="Scan scenes, then add and translate new entries.")
    p.add_argument("scenes", nargs="+", help="Scene document(s) (.json).")

    p = sub.add_parser("add", help="Add one reviewed string to the dataset.")
    p.add_argument("text", help="Source text to add.")

    p = sub.add_parser("replace", help="Replace scene text with keys and save the scenes.")
    p.add_argument("scenes", nargs="+", help="Scene document(s) (.json).")

    sub.add_parser("fill-missing", help="Translate languages missing from existing entries.")

    p = sub.add_parser("preview", help="Print scene text as displayed in a language.")
    p.add_argument("scenes", nargs="+", help="Scene document(s) (.json).")
    p.add_argument("--lang", default=Language.SOURCE.code,
                   help="Display language (EN, ES, FR).")

    p = sub.add_parser("set-key", help="Store the translation API key in the settings.")
    p.add_argument("auth_key", help="DeepL authentication key.")

    return parser


def _print_report(report):
    print(f"Added {len(report.added)} entries, skipped {len(report.skipped)}, "
          f"updated {len(report.updated)}.")
    for failure in report.failures:
        print(f"  ! {failure.key} [{failure.language}]: {failure.error}")


def run(args) -> int:
    from controllers.localization_controller import LocalizationController

    settings = load_settings()
    if args.data:
        settings["dataset_path"] = args.data
    if args.engine:
        settings["active_engine"] = args.engine
    if args.target_languages:
        settings["target_languages"] = [code.upper() for code in args.target_languages]

    controller = LocalizationController(settings)

    if args.command == "init":
        dataset = controller.create_data_file()
        print(f"Dataset ready: {controller.store.path} ({len(dataset)} entries)")

    elif args.command == "scan-scene":
        controller.open_scenes(args.scenes)
        findings = controller.scan_scene()
        print(f"Found {len(findings)} strings not yet keys:")
        for finding in findings:
            print(f"  {finding.scene_name}:{finding.node_path}\t{finding.suggested_key}\t{finding.text}")

    elif args.command == "scan-scripts":
        findings = controller.scan_scripts(args.root)
        print(f"Found {len(findings)} strings in Scripts (not all should be translated):")
        for index, finding in enumerate(findings):
            print(f"  [{index}] {finding.location}\t{finding.matched_string}")

    elif args.command == "translate":
        controller.open_scenes(args.scenes)
        controller.scan_scene()
        _print_report(controller.process_and_translate())

    elif args.command == "add":
        entry = controller.add_to_data(args.text)
        if entry is None:
            print("Already in dataset.")
        else:
            print(f"Added {entry.key}: {entry.translations}")

    elif args.command == "replace":
        controller.open_scenes(args.scenes)
        count = controller.replace_scene_text()
        print(f"Replaced {count} texts with keys.")

    elif args.command == "fill-missing":
        _print_report(controller.fill_missing())

    elif args.command == "preview":
        language = Language.from_code(args.lang)
        controller.open_scenes(args.scenes)
        controller.preview(language)
        for scene in controller.scenes:
            for path, node in scene.walk():
                if node.component is not None:
                    print(f"  {scene.name}:{path}\t{node.component.get_text()}")

    elif args.command == "set-key":
        controller.set_credential(args.auth_key)
        print("API key saved.")

    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)

    try:
        return run(args)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2
    except LocForgeError as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
