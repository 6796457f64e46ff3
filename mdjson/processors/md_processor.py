"""
Markdown-to-JSON Processor.

High-level orchestrator for the conversion pipeline.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from core.constants import DEFAULT_OUTPUT_FILENAME
from core.exceptions import InvalidPathError, MarkdownJSONError, SerializationError
from core.models import (
    BatchResult,
    Document,
    DocumentError,
    OutputDocument,
    OutputMode,
    ParsedDocument
)
from utils.json_utils import dumps_json
from utils.path_utils import normalize_path, to_json_path
from ..core import (
    FrontMatterSplitter,
    MarkdownRenderer,
    RecordBuilder,
    RendererOptions,
    TitleExtractor,
    TreeAssembler
)

logger = logging.getLogger(__name__)


class MarkdownJSONProcessor:
    """
    Orchestrates the complete Markdown-to-JSON pipeline.
    
    Coordinates front matter splitting, title resolution, rendering, record
    building and, in consolidated mode, tree assembly.
    """
    
    def __init__(
        self,
        options: Optional[RendererOptions] = None,
        output_filename: str = DEFAULT_OUTPUT_FILENAME,
        strict_paths: bool = False,
        json_indent: Optional[int] = None
    ):
        """
        Initialize processor.
        
        Args:
            options: Renderer options
            output_filename: Path of the single output in consolidated mode
            strict_paths: Fail on tree key collisions instead of overwriting
            json_indent: Indentation for serialized JSON
        """
        self.output_filename = output_filename or DEFAULT_OUTPUT_FILENAME
        self.strict_paths = strict_paths
        self.json_indent = json_indent
        
        # Initialize components
        self.splitter = FrontMatterSplitter()
        self.title_extractor = TitleExtractor()
        self.renderer = MarkdownRenderer(options)
        self.record_builder = RecordBuilder()
    
    def parse(self, document: Document) -> ParsedDocument:
        """Split a document into front matter and body."""
        return self.splitter.split(document.text, document.path)
    
    def convert(self, document: Document) -> Dict[str, Any]:
        """
        Convert one document into its record.
        
        Args:
            document: Source document
            
        Returns:
            Flat record with front matter keys, title and rendered body
        """
        parsed = self.parse(document)
        
        title = self.title_extractor.resolve(parsed.front_matter, parsed.body)
        markup = self.renderer.render(parsed.body, document.path)
        
        if title is None:
            logger.debug(f"No title resolved for {document.path}")
        
        return self.record_builder.build(parsed.front_matter, title, markup, document.path)
    
    def serialize(self, data: Any, path: Optional[str] = None) -> bytes:
        """
        Serialize a record or tree to standard JSON.
        
        Args:
            data: Record or tree
            path: Document path the data belongs to
            
        Returns:
            UTF-8 JSON bytes
            
        Raises:
            SerializationError: If data holds NaN, infinities or other values JSON cannot carry
        """
        try:
            return dumps_json(data, self.json_indent)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Record is not JSON serializable: {exc}", path) from exc
    
    def to_output(self, document: Document) -> OutputDocument:
        """Convert one document into its own JSON output."""
        if not normalize_path(document.path):
            raise InvalidPathError(f"Cannot name output for empty path: {document.path!r}", document.path)
        
        record = self.convert(document)
        return OutputDocument(
            path=to_json_path(document.path),
            contents=self.serialize(record, document.path)
        )
    
    def process(
        self,
        documents: Iterable[Document],
        mode: OutputMode = OutputMode.PER_FILE
    ) -> List[OutputDocument]:
        """
        Main processing entry point. Stops at the first failing document.
        
        Args:
            documents: Documents in driver order
            mode: PER_FILE for one output per input, CONSOLIDATED for one tree
            
        Returns:
            Output documents
        """
        return self.process_batch(documents, mode, stop_on_error=True).outputs
    
    def process_batch(
        self,
        documents: Iterable[Document],
        mode: OutputMode = OutputMode.PER_FILE,
        stop_on_error: bool = True
    ) -> BatchResult:
        """
        Process a batch, optionally carrying on past failing documents.
        
        Args:
            documents: Documents in driver order
            mode: Output mode chosen by the caller
            stop_on_error: Re-raise the first error instead of collecting it
            
        Returns:
            BatchResult with outputs and per-document errors
        """
        result = BatchResult()
        assembler = TreeAssembler(self.strict_paths) if mode is OutputMode.CONSOLIDATED else None
        
        for document in documents:
            try:
                if assembler is None:
                    result.outputs.append(self.to_output(document))
                else:
                    record = self.convert(document)
                    # Records that cannot serialize stay out of the tree
                    self.serialize(record, document.path)
                    assembler.insert(document.path, record)
            except MarkdownJSONError as exc:
                if stop_on_error:
                    raise
                logger.error(f"Failed to convert {document.path}: {exc}")
                result.errors.append(DocumentError(path=document.path, error=exc))
        
        if assembler is not None:
            result.outputs.append(OutputDocument(
                path=self.output_filename,
                contents=self.serialize(assembler.to_dict(), self.output_filename)
            ))
            logger.info(f"Consolidated {assembler.record_count} documents into {self.output_filename}")
        else:
            logger.info(f"Converted {len(result.outputs)} documents")
        
        return result
