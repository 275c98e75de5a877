from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

# --- Internal Parsing Models (yt-dlp) ---

class YtDlpCaptionFormat(BaseModel):
    ext: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(extra='ignore')

class YtDlpInfo(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    subtitles: Dict[str, List[YtDlpCaptionFormat]] = Field(default_factory=dict)
    automatic_captions: Dict[str, List[YtDlpCaptionFormat]] = Field(default_factory=dict)

    model_config = ConfigDict(extra='ignore')

# --- Caption tracks ---

class CaptionTrack(BaseModel):
    language: str
    formats: List[YtDlpCaptionFormat] = Field(default_factory=list)
    is_generated: bool = False

    def url_for(self, preferred_ext: str) -> Optional[str]:
        """URL of the preferred format, else of the first format that has one."""
        for fmt in self.formats:
            if fmt.ext == preferred_ext and fmt.url:
                return fmt.url
        for fmt in self.formats:
            if fmt.url:
                return fmt.url
        return None
