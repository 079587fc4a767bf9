import argparse
from collections.abc import Callable, Sequence

import uvicorn

from dialog_localizer.anomaly.scanner import AnomalyScanner, format_report
from dialog_localizer.config.settings import Settings
from dialog_localizer.dashboard.app import create_app
from dialog_localizer.database.connection import close_pool, init_pool
from dialog_localizer.database.repositories.dialog_files_repository import DialogFilesRepository
from dialog_localizer.database.repositories.dialog_strings_repository import (
    DialogStringsRepository,
)
from dialog_localizer.database.repositories.glossary_repository import GlossaryRepository
from dialog_localizer.database.schema import clear_all, init_schema
from dialog_localizer.glossary.loader import GlossaryLoader
from dialog_localizer.glossary.provider import GlossaryMatcherProvider
from dialog_localizer.logging.logger import Log
from dialog_localizer.notifications.factory import NotifierFactory
from dialog_localizer.processor.exporter import ExportProcessor
from dialog_localizer.processor.importer import ImportProcessor
from dialog_localizer.processor.masking import MaskingProcessor
from dialog_localizer.processor.translation import TranslationProcessor
from dialog_localizer.translation.factory import TranslatorFactory


def run_import(settings: Settings) -> None:
    ImportProcessor(
        DialogFilesRepository(),
        DialogStringsRepository(settings.import_batch_size),
        settings.raw_strings_dir,
    ).run()


def run_mask(settings: Settings) -> None:
    glossary_repo = GlossaryRepository(settings.glossary_batch_size)
    MaskingProcessor(
        GlossaryLoader(settings.glossary_dir),
        glossary_repo,
        DialogStringsRepository(settings.import_batch_size),
        GlossaryMatcherProvider(glossary_repo),
    ).run()


def run_translate(settings: Settings) -> None:
    provider = GlossaryMatcherProvider(GlossaryRepository(settings.glossary_batch_size))
    provider.rebuild()
    notifier = NotifierFactory.create(settings)
    try:
        TranslationProcessor(
            TranslatorFactory.create(settings),
            DialogStringsRepository(settings.import_batch_size),
            provider,
            notifier,
            notify_interval_seconds=settings.notify_interval_seconds,
            notify_every_items=settings.notify_every_items,
        ).run()
    finally:
        notifier.close()


def run_scan(settings: Settings) -> None:
    Log.info("Scanning for anomalies...")
    report = AnomalyScanner().scan(DialogStringsRepository(settings.import_batch_size).list_all())
    for line in format_report(report):
        Log.info(line)


def run_export(settings: Settings) -> None:
    ExportProcessor(
        DialogFilesRepository(),
        DialogStringsRepository(settings.import_batch_size),
        settings.export_dir,
    ).run()


def run_clear(settings: Settings) -> None:
    _ = settings
    Log.warning("Clearing database...")
    clear_all()


def run_init_db(settings: Settings) -> None:
    _ = settings
    init_schema()


def run_serve(settings: Settings) -> None:
    app = create_app(
        DialogStringsRepository(settings.import_batch_size),
        page_size=settings.review_page_size,
    )
    Log.info(f"Server is running at http://{settings.dashboard_host}:{settings.dashboard_port}")
    uvicorn.run(app, host=settings.dashboard_host, port=settings.dashboard_port)


COMMANDS: dict[str, tuple[Callable[[Settings], None], str]] = {
    "init-db": (run_init_db, "create the database tables"),
    "import": (run_import, "import SST XML files from the raw strings directory"),
    "mask": (run_mask, "reload the glossary and mask every dialog string"),
    "translate": (run_translate, "translate every string that has no dest yet"),
    "scan": (run_scan, "report anomalous translations"),
    "export": (run_export, "write translated SST XML files"),
    "clear": (run_clear, "delete all strings, files and glossary terms"),
    "serve": (run_serve, "start the review dashboard"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dialog-localizer",
        description="Mask, translate and review game dialog strings.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (_handler, help_text) in COMMANDS.items():
        subparsers.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point: parse command -> initialize pool -> run command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, settings.log_file)
    init_pool(settings)

    try:
        handler, _help_text = COMMANDS[args.command]
        handler(settings)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
