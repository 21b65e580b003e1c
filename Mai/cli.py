# Mai/cli.py

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from Mai.config import Settings
from Mai.generation import HPFGenerator
from Mai.models import NarrativeContext
from Mai.narrative import build_prompt_payload

logging.basicConfig(
    format="%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-25s | %(message)s",
    level=logging.INFO,
)
log = logging.getLogger("Mai.cli")


def _load_context(path: Path) -> NarrativeContext:
    log.debug(f"Loading context from {path}")
    return NarrativeContext.model_validate_json(path.read_text(encoding="utf-8"))


def main(argv=None):
    settings = Settings()

    parser = argparse.ArgumentParser(
        prog="mai",
        description="Mai: History / Present / Future narratives for your workflow"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging for all Mai modules."
    )
    subparsers = parser.add_subparsers(dest="command", title="Available Commands", required=True)

    # --- H/P/F Subcommand ---
    parser_hpf = subparsers.add_parser("hpf", help="Generate H/P/F for a context JSON file.")
    parser_hpf.add_argument("--context", type=Path, required=True, help="Path to a context JSON file.")
    parser_hpf.add_argument("--remote", action="store_true", help="Use the remote generator (falls back to local on failure).")
    def handle_hpf(args_ns, current_settings: Settings):
        context = _load_context(args_ns.context)
        generator = HPFGenerator(current_settings)
        result = generator.generate(context) if args_ns.remote else generator.local(context)
        print(result.model_dump_json(indent=2))
    parser_hpf.set_defaults(func=handle_hpf)

    # --- Prompt Subcommand ---
    parser_prompt = subparsers.add_parser("prompt", help="Print the generator prompts for a context JSON file.")
    parser_prompt.add_argument("--context", type=Path, required=True, help="Path to a context JSON file.")
    def handle_prompt(args_ns, current_settings: Settings):
        payload = build_prompt_payload(_load_context(args_ns.context))
        print(payload.system_prompt)
        print()
        print(payload.user_prompt)
    parser_prompt.set_defaults(func=handle_prompt)

    # --- Serve Subcommand ---
    parser_serve = subparsers.add_parser("serve", help="Run the Mai HTTP API.")
    parser_serve.add_argument("--host", default=None, help="Bind address (default: MAI_API_HOST).")
    parser_serve.add_argument("--port", type=int, default=None, help="Port (default: MAI_API_PORT).")
    def handle_serve(args_ns, current_settings: Settings):
        import uvicorn
        from Mai.api.main import app
        host = args_ns.host or current_settings.api_host
        port = args_ns.port or current_settings.api_port
        log.info(f"CLI: Starting Mai API on {host}:{port}...")
        uvicorn.run(app, host=host, port=port, log_level="info")
    parser_serve.set_defaults(func=handle_serve)

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger("Mai").setLevel(logging.DEBUG)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        for handler in root_logger.handlers:
            handler.setLevel(logging.DEBUG)
        log.debug("Debug logging enabled via CLI.")

    if hasattr(args, "func"):
        args.func(args, settings)
    else:
        parser.print_help()
        sys.exit(1)

if __name__ == "__main__":
    main()
