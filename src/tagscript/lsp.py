"""Minimal LSP server for TagScript — scanner diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from tagscript import __version__
from tagscript.debug import describe_note
from tagscript.lexer import Lexer
from tagscript.tokens import ScanNote, position_at

server = LanguageServer("tagscript-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _note_diagnostic(note: ScanNote, source: str) -> Diagnostic:
    start = position_at(source, note.offset)
    end = position_at(source, note.offset + len(note.text))
    return Diagnostic(
        range=Range(
            start=Position(line=start.line - 1, character=start.column - 1),
            end=Position(line=end.line - 1, character=end.column - 1),
        ),
        message=describe_note(note),
        severity=DiagnosticSeverity.Warning,
        source="tagscript",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish a warning per scanner note."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source

    lexer = Lexer(source)
    lexer.tokenize()
    diagnostics = [_note_diagnostic(note, source) for note in lexer.notes]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
