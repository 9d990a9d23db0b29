#!/usr/bin/env python3
"""Reprocessa manualmente uma linha da planilha de respostas.

Uso:
    python scripts/process_row.py --row 12 --dry-run
    python scripts/process_row.py --row 12

Com --dry-run apenas resolve identidade, expiração e nome do token
(nenhuma chamada à API, nenhum e-mail, nenhuma escrita na planilha).
"""

from __future__ import annotations

import argparse
import json
import sys
import uuid
from collections.abc import Sequence
from typing import TYPE_CHECKING

from app.bootstrap import get_issue_token_use_case, initialize_app, validate_runtime_settings
from app.domain.errors import ConfigurationError, IdentityError
from app.domain.submission import SubmissionEvent
from app.observability import correlation_scope

if TYPE_CHECKING:
    from app.use_cases import IssueTokenUseCase


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--row",
        type=int,
        required=True,
        help="Linha (1-based) da resposta na planilha.",
    )
    parser.add_argument(
        "--email",
        default=None,
        help="E-mail do solicitante. Se omitido, lido da coluna de e-mail da linha.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve os valores sem emitir o token.",
    )
    return parser.parse_args(argv)


def build_event(args: argparse.Namespace) -> SubmissionEvent:
    email = args.email
    return SubmissionEvent(
        row=args.row,
        respondent_email=(lambda: email) if email else None,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    initialize_app()
    validate_runtime_settings()
    use_case = get_issue_token_use_case()
    event = build_event(args)

    with correlation_scope(f"process-row-{args.row}-{uuid.uuid4().hex[:8]}"):
        if args.dry_run:
            return _dry_run(use_case, event)
        try:
            result = use_case.execute(event)
        except ConfigurationError as exc:
            print(f"[apply] row={args.row} error={exc}")
            return 2
    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return 0 if result.success else 1


def _dry_run(use_case: IssueTokenUseCase, event: SubmissionEvent) -> int:
    try:
        preview = use_case.preview(event)
    except IdentityError as exc:
        print(f"[dry-run] row={event.row} error={exc}")
        return 1
    print(
        f"[dry-run] row={event.row} identity={preview.identity} "
        f"expires_at={preview.expires_at} credential_name={preview.credential_name}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
