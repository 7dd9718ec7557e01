"""
Loading LG content and files into a single ParseResult.

This module is the caller side of the parser: it splits raw text into
chunks, reads files from disk, and follows additional file references so
that a root LG file and everything it references end up merged together.
"""

import logging
from pathlib import Path

from mslg.exceptions import ErrorContext, InvalidFileReferenceError, LGError
from mslg.parsing.chunker import split_into_chunks
from mslg.parsing.parser import LGParser
from mslg.structure.objects import ParseResult

logger = logging.getLogger(__name__)


def parse_content(
    content: str,
    result: ParseResult | None = None,
    *,
    strict_variations: bool = False,
    source_file: str | None = None,
) -> ParseResult:
    """
    Split and parse LG text.

    Params:
        content: Raw LG file text
        result: Existing result to merge into
        strict_variations: Raise on malformed variation lines
        source_file: File name reported in error locations

    Returns:
        The populated ParseResult
    """
    parser = LGParser(strict_variations=strict_variations)
    return parser.parse(split_into_chunks(content), result=result, source_file=source_file)


def read_lg_file(path: str | Path) -> str:
    """
    Read an LG file as UTF-8, dropping a leading byte order mark.

    Params:
        path: LG file to read

    Returns:
        File text

    Raises:
        LGError: If the file is not valid UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise LGError(
            f"LG file is not valid UTF-8 ({exc.reason} at byte {exc.start})",
            ErrorContext(source_file=str(path)),
        ) from exc


def parse_file(
    path: str | Path,
    *,
    follow_references: bool = True,
    strict_variations: bool = False,
) -> ParseResult:
    """
    Parse an LG file and, recursively, the files it references.

    References are resolved relative to the referencing file. Every file is
    parsed once, so reference cycles terminate. The returned result still
    lists every reference encountered in ``additional_file_references``.

    Params:
        path: Root LG file
        follow_references: Parse and merge referenced files
        strict_variations: Raise on malformed variation lines

    Returns:
        Merged ParseResult for the root file and its references

    Raises:
        InvalidFileReferenceError: If the root or a referenced file does not exist
        LGError: On the first syntax or semantic error in any file
    """
    root = Path(path)
    if not root.is_file():
        raise InvalidFileReferenceError(str(root), "LG file does not exist")

    result = ParseResult()
    parser = LGParser(strict_variations=strict_variations)
    queue = [root]
    seen: set[Path] = set()

    while queue:
        current = queue.pop(0)
        resolved = current.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)

        logger.debug("Parsing LG file %s", current)
        file_result = parser.parse(
            split_into_chunks(read_lg_file(current)), source_file=str(current)
        )
        result.merge(file_result)

        if not follow_references:
            continue

        for reference in file_result.additional_file_references:
            referenced = current.parent / reference
            if not referenced.is_file():
                error = InvalidFileReferenceError(reference, "Referenced LG file does not exist")
                raise error.with_context(ErrorContext(source_file=str(current)))
            queue.append(referenced)

    return result


def parse_files(paths: list[str | Path], **kwargs) -> ParseResult:
    """
    Parse several root LG files into one merged ParseResult.

    Params:
        paths: Root LG files
        **kwargs: Forwarded to ``parse_file``

    Returns:
        Merged ParseResult
    """
    result = ParseResult()
    for path in paths:
        try:
            result.merge(parse_file(path, **kwargs))
        except LGError:
            logger.error("Failed to parse LG file %s", path)
            raise
    return result
