"""File handling utilities."""

import base64
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

class FileUtils:
    """Utilities for file operations."""
    
    @staticmethod
    def load_image_bytes(image_candidates: list) -> Optional[bytes]:
        """Load image bytes from the first available candidate path."""
        for path in image_candidates:
            if isinstance(path, str):
                path = Path(path)
            if path.exists():
                try:
                    return path.read_bytes()
                except OSError:
                    logger.warning(f"Could not read image {path}")
                    continue
        return None
    
    @staticmethod
    def create_background_css(image_bytes: Optional[bytes], opacity: float = 0.2) -> str:
        """Create CSS for the hero background image, or nothing if there is none."""
        if not image_bytes:
            return ""
        
        b64 = base64.b64encode(image_bytes).decode()
        return f"""
        .hero::before {{
            content: "";
            position: absolute;
            inset: 0;
            background-image: url('data:image/jpeg;base64,{b64}');
            background-size: cover;
            background-position: center;
            background-repeat: no-repeat;
            opacity: {opacity};
            border-radius: 16px;
        }}
        """
