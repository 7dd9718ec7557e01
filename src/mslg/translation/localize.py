"""
Line-by-line localization of LG files.

The driver rewrites an LG file one line at a time: template headers,
entity definitions and condition markers are copied verbatim, variation
lines are sent to a translator, and comments and file-reference labels are
translated on request. Output lines are CRLF-terminated.
"""

import logging
from pathlib import Path

from mslg.core import markers
from mslg.exceptions import LGError, UnrecognizedChunkError
from mslg.parsing.loader import read_lg_file
from mslg.parsing.utils import match_prefix, parse_file_reference, split_list_marker
from mslg.translation.base import TextTranslator
from mslg.translation.config import TranslationConfig

logger = logging.getLogger(__name__)

LG_FILE_EXTENSION = ".lg"
NEWLINE = "\r\n"

UNTRANSLATED_PAYLOAD_MARKERS = markers.CONDITION_MARKERS + markers.DEFAULT_MARKERS


def _translate(translator: TextTranslator, text: str, config: TranslationConfig) -> str:
    return translator.translate(text, config.to_lang, config.src_lang)


def translate_line(line: str, translator: TextTranslator, config: TranslationConfig) -> str:
    """
    Localize a single LG line.

    Params:
        line: Raw line from the file
        translator: Backend used for translatable text
        config: Languages and what to translate

    Returns:
        The localized line without a line terminator

    Raises:
        UnrecognizedChunkError: If the line is not valid LG content
        TranslationServiceError: If the translator fails
    """
    current = line.strip()

    if not current:
        return ""

    if current.startswith(markers.COMMENT):
        if not config.translate_comments:
            return current
        comment = current[len(markers.COMMENT):].strip()
        if not comment:
            return current
        return f"{markers.COMMENT} {_translate(translator, comment, config)}"

    if current.startswith(markers.FILE_REF):
        if not config.translate_link_text:
            return current
        reference = parse_file_reference(current)
        if reference is None:
            return current
        label, target = reference
        translated_label = _translate(translator, label, config) if label.strip() else label
        return f"[{translated_label}]({target})"

    if current.startswith((markers.ENTITY, markers.TEMPLATE)):
        return current

    split = split_list_marker(current)
    if split is not None:
        marker, content = split
        if not content or match_prefix(content, UNTRANSLATED_PAYLOAD_MARKERS):
            return current
        return f"\t{marker} {_translate(translator, content, config)}"

    raise UnrecognizedChunkError(current, "Invalid line detected")


def translate_lg_content(
    content: str, translator: TextTranslator, config: TranslationConfig
) -> str:
    """
    Localize the full text of an LG file.

    Params:
        content: LG file text
        translator: Backend used for translatable text
        config: Languages and what to translate

    Returns:
        Localized file text with CRLF line endings

    Raises:
        UnrecognizedChunkError: On the first line that is not valid LG content
        TranslationServiceError: If the translator fails
    """
    localized = []
    for line in markers.LINE_SPLIT_PATTERN.split(content):
        localized_line = translate_line(line, translator, config)
        logger.debug("%s", localized_line)
        localized.append(localized_line + NEWLINE)
    return "".join(localized)


def output_path_for(
    input_file: str | Path,
    to_lang: str,
    output_folder: str | Path | None = None,
    output_file_name: str | None = None,
) -> Path:
    """
    Build the path a localized file is written to.

    The file lands in a ``<to_lang>`` folder under ``output_folder``, or
    next to the input file when no output folder is given. With
    ``output_file_name`` the file is named ``<name>_<input stem>.lg``.

    Params:
        input_file: LG file being localized
        to_lang: Target language code
        output_folder: Base output folder
        output_file_name: Prefix for the output file name

    Returns:
        Output file path
    """
    input_path = Path(input_file)

    if output_file_name:
        prefix = output_file_name
        if prefix.endswith(LG_FILE_EXTENSION):
            prefix = prefix[: -len(LG_FILE_EXTENSION)]
        file_name = f"{prefix}_{input_path.stem}{LG_FILE_EXTENSION}"
    else:
        file_name = input_path.name

    base_folder = Path(output_folder) if output_folder else input_path.parent
    return base_folder / to_lang / file_name


def localize_files(
    files: list[str | Path],
    translator: TextTranslator,
    config: TranslationConfig,
    output_folder: str | Path | None = None,
    output_file_name: str | None = None,
) -> list[Path]:
    """
    Localize LG files and write the results to disk.

    Files are processed one after another; the first failure aborts the run.

    Params:
        files: LG files to localize
        translator: Backend used for translatable text
        config: Languages and what to translate
        output_folder: Base output folder, must exist when given
        output_file_name: Prefix for output file names

    Returns:
        Paths of the written files, in input order

    Raises:
        LGError: If no files are given, the output folder is missing, or a
            file cannot be localized
    """
    if not files:
        raise LGError("No .lg files specified")

    if output_folder is not None and not Path(output_folder).is_dir():
        raise LGError(f"Output folder {output_folder} does not exist")

    written = []
    for file in files:
        input_path = Path(file)
        logger.info("Translating file: %s", input_path)
        content = read_lg_file(input_path)
        localized = translate_lg_content(content, translator, config)

        output_path = output_path_for(input_path, config.to_lang, output_folder, output_file_name)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the CRLF terminators as written
        with output_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(localized)
        logger.info("Successfully wrote to %s", output_path)
        written.append(output_path)

    return written
