"""
Standalone HTML report for a finished summary.
"""
from datetime import datetime
from html import escape
from string import Template
from typing import Optional

from ytsummarize.models import TweetReference, VideoMetadata, VideoReference

REPORT_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Video Summary - $title</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background: white;
            padding: 30px;
            border-radius: 10px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        .header {
            text-align: center;
            border-bottom: 2px solid #e0e0e0;
            padding-bottom: 20px;
            margin-bottom: 30px;
        }
        .video-title { color: #1a1a1a; font-size: 28px; font-weight: 700; margin-bottom: 10px; }
        .video-link { color: #0654ba; text-decoration: none; font-size: 16px; }
        .video-link:hover { text-decoration: underline; }
        .metadata { color: #666; font-size: 14px; margin-top: 10px; }
        .section-title {
            color: #2c3e50;
            font-size: 24px;
            font-weight: 600;
            margin-bottom: 20px;
            border-left: 4px solid #3498db;
            padding-left: 15px;
        }
        .summary-content {
            background: #f8f9fa;
            padding: 20px;
            border-radius: 8px;
            border-left: 4px solid #3498db;
            font-size: 16px;
            line-height: 1.7;
        }
        .footer {
            margin-top: 40px;
            padding-top: 20px;
            border-top: 1px solid #e0e0e0;
            text-align: center;
            color: #666;
            font-size: 14px;
        }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1 class="video-title">$title</h1>
            <a href="$source_url" class="video-link" target="_blank" rel="noopener">$link_label &#8599;</a>
            <div class="metadata">$byline Generated on $generated_on</div>
        </div>

        <div class="summary-section">
            <h2 class="section-title">AI-Generated Summary</h2>
            <div class="summary-content">
$summary_html
            </div>
        </div>

        <div class="footer">
            <p>Generated by YT Summarize - AI-powered video summaries</p>
        </div>
    </div>
</body>
</html>
""")


def render_report(
    metadata: VideoMetadata,
    summary_html: str,
    reference: VideoReference,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Embed a summary fragment in the report template.

    Pure apart from the default timestamp: pass generated_at for a
    deterministic document.
    """
    generated_at = generated_at or datetime.now()
    is_tweet = isinstance(reference, TweetReference)
    byline = f"By {escape(metadata.author_name)} &middot;" if metadata.author_name else ""

    return REPORT_TEMPLATE.substitute(
        title=escape(metadata.title),
        source_url=escape(reference.source_url, quote=True),
        link_label="View post on X" if is_tweet else "Watch on YouTube",
        byline=byline,
        generated_on=generated_at.strftime("%Y-%m-%d at %H:%M:%S"),
        summary_html=summary_html,
    )
