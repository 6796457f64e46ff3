"""
Document Storage Service

Reads markdown documents from a directory tree and writes JSON outputs back.
"""
import logging
from pathlib import Path
from typing import List

from core.constants import DEFAULT_SOURCE_PATTERN
from core.models import Document, OutputDocument
from utils.path_utils import normalize_path

logger = logging.getLogger(__name__)


class DocumentStorageService:
    """Service for loading source documents and storing converted output."""
    
    def __init__(self, root: str):
        """
        Initialize storage service.
        
        Args:
            root: Directory that document paths are relative to
        """
        self.root = Path(root)
    
    def load_documents(self, pattern: str = DEFAULT_SOURCE_PATTERN) -> List[Document]:
        """
        Load every file under root matching pattern.
        
        Args:
            pattern: Glob pattern relative to root
        
        Returns:
            Documents sorted by relative path
        """
        if not self.root.is_dir():
            raise FileNotFoundError(f"Source directory not found: {self.root}")
        
        documents = []
        for file_path in self.root.glob(pattern):
            if not file_path.is_file():
                continue
            
            relative = normalize_path(file_path.relative_to(self.root).as_posix())
            documents.append(Document(path=relative, contents=file_path.read_bytes()))
        
        documents.sort(key=lambda doc: doc.path)
        logger.debug(f"Loaded {len(documents)} documents from {self.root}")
        return documents
    
    @staticmethod
    def write_outputs(outputs: List[OutputDocument], out_dir: str) -> List[Path]:
        """
        Write output documents below out_dir.
        
        Args:
            outputs: Converted outputs
            out_dir: Destination directory
        
        Returns:
            Paths written
        """
        base = Path(out_dir)
        written = []
        
        for output in outputs:
            target = base / normalize_path(output.path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(output.contents)
            written.append(target)
            logger.debug(f"Wrote {target}")
        
        return written
