"""
Centralized configuration for LLM Prompts.

Both backends must answer with an HTML fragment (no markdown, no full
document) so the result can be embedded directly into the report template.
"""

class SummarizationPrompts:
    """Prompts for the video summarization backends."""

    SYSTEM = """You are a helpful assistant that summarizes videos.
Provide clear, concise summaries with the main takeaways."""

    OUTPUT_FORMAT = """Format your answer as an HTML fragment only:
<p>A two or three sentence overview of the video.</p>
<h3>Key Takeaways</h3>
<ul>
<li>One takeaway per item.</li>
</ul>
Use only <p>, <h3>, <ul>, <li>, <strong> and <em> tags.
Do not use markdown, code fences, <html>, <head> or <body> tags.
Start directly with the <p> overview."""

    TRANSCRIPT = """Please summarize the following YouTube video transcript and provide the main takeaways.

Video Title: {title}

Transcript:
{transcript}

{output_format}"""

    VIDEO = """Please watch the attached video from a post on X/Twitter and summarize it with the main takeaways.

Post by: {author}
Post text: {caption}

{output_format}"""

    @classmethod
    def for_transcript(cls, title: str, transcript: str) -> str:
        return cls.TRANSCRIPT.format(
            title=title,
            transcript=transcript,
            output_format=cls.OUTPUT_FORMAT,
        )

    @classmethod
    def for_video(cls, author: str, caption: str) -> str:
        return cls.VIDEO.format(
            author=author,
            caption=caption or "(no text)",
            output_format=cls.OUTPUT_FORMAT,
        )
