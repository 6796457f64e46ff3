"""
Entry points for mdjson.

Functional API over MarkdownJSONProcessor for callers that hold documents
in memory.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from core.constants import DEFAULT_OUTPUT_FILENAME
from core.models import BatchResult, Document, OutputDocument, OutputMode
from .core import RendererOptions
from .processors import MarkdownJSONProcessor

DocumentLike = Union[Document, Tuple[str, Union[bytes, str]]]


def _as_documents(documents: Iterable[DocumentLike]) -> List[Document]:
    return [
        doc if isinstance(doc, Document) else Document(path=doc[0], contents=doc[1])
        for doc in documents
    ]


def _build_processor(
    options: Optional[Mapping[str, Any]],
    output_filename: Optional[str],
    strict_paths: bool,
    json_indent: Optional[int]
) -> MarkdownJSONProcessor:
    return MarkdownJSONProcessor(
        options=RendererOptions.from_mapping(options),
        output_filename=output_filename or DEFAULT_OUTPUT_FILENAME,
        strict_paths=strict_paths,
        json_indent=json_indent
    )


def convert_document(
    path: str,
    contents: Union[bytes, str],
    options: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """
    Convert a single markdown document into its record.
    
    Args:
        path: Relative document path
        contents: Raw document contents
        options: Renderer options, e.g. {'smartypants': True}
        
    Returns:
        Record dictionary
    """
    processor = _build_processor(options, None, False, None)
    return processor.convert(Document(path=path, contents=contents))


def markdown_to_json(
    documents: Iterable[DocumentLike],
    mode: OutputMode = OutputMode.PER_FILE,
    output_filename: Optional[str] = None,
    options: Optional[Mapping[str, Any]] = None,
    strict_paths: bool = False,
    json_indent: Optional[int] = None
) -> List[OutputDocument]:
    """
    Convert a batch of markdown documents to JSON outputs.
    
    Args:
        documents: Documents or (path, contents) pairs in driver order
        mode: PER_FILE or CONSOLIDATED
        output_filename: Consolidated output path, defaults to content.json
        options: Renderer options; unknown keys go to markdown-it unchanged
        strict_paths: Fail on tree key collisions instead of overwriting
        json_indent: Indentation for serialized JSON
        
    Returns:
        One output per document, or a single consolidated output
    """
    processor = _build_processor(options, output_filename, strict_paths, json_indent)
    return processor.process(_as_documents(documents), mode)


def markdown_to_json_batch(
    documents: Iterable[DocumentLike],
    mode: OutputMode = OutputMode.PER_FILE,
    output_filename: Optional[str] = None,
    options: Optional[Mapping[str, Any]] = None,
    strict_paths: bool = False,
    json_indent: Optional[int] = None,
    stop_on_error: bool = False
) -> BatchResult:
    """
    Same as markdown_to_json but collects per-document errors.
    
    Returns:
        BatchResult with outputs and errors
    """
    processor = _build_processor(options, output_filename, strict_paths, json_indent)
    return processor.process_batch(_as_documents(documents), mode, stop_on_error=stop_on_error)
