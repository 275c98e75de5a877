"""
Tests for the command-line entry point.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from ytsummarize import cli
from ytsummarize.core.exceptions import NoCaptionsAvailableError
from ytsummarize.models import LLMProviderType


def test_parser_defaults():
    args = cli.build_parser().parse_args(["abc123"])
    assert args.video == "abc123"
    assert args.provider is None
    assert args.verbose is False


def test_parser_rejects_unknown_provider():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["abc123", "--provider", "openai"])


@pytest.mark.asyncio
async def test_summarize_prints_summary(tmp_path, capsys):
    report = MagicMock()
    report.metadata.title = "Test Video"
    report.summary.summary_html = "<p>Summary</p>"
    pipeline = MagicMock()
    pipeline.run = AsyncMock(return_value=report)

    with patch.object(cli.SummaryPipeline, "from_settings", return_value=pipeline) as from_settings:
        code = await cli.summarize("abc123", "groq", str(tmp_path))

    assert code == 0
    out = capsys.readouterr().out
    assert "Video: Test Video" in out
    assert "<p>Summary</p>" in out
    request = pipeline.run.call_args.args[0]
    assert request.provider == LLMProviderType.GROQ
    assert from_settings.call_args.kwargs["artifact_store"].output_dir == tmp_path


@pytest.mark.asyncio
async def test_summarize_failure_returns_nonzero(tmp_path, capsys):
    pipeline = MagicMock()
    pipeline.run = AsyncMock(side_effect=NoCaptionsAvailableError("abc123"))

    with patch.object(cli.SummaryPipeline, "from_settings", return_value=pipeline):
        code = await cli.summarize("abc123", None, str(tmp_path))

    assert code == 1
    assert "SUMMARY" not in capsys.readouterr().out


@pytest.mark.asyncio
async def test_summarize_blank_video_returns_nonzero(tmp_path):
    with patch.object(cli.SummaryPipeline, "from_settings") as from_settings:
        code = await cli.summarize("   ", None, str(tmp_path))

    assert code == 1
    from_settings.assert_not_called()


def test_main_blank_video_exits_cleanly(tmp_path):
    with patch.object(cli, "setup_logging"), \
            patch.object(cli.SummaryPipeline, "from_settings") as from_settings:
        assert cli.main(["", "--output-dir", str(tmp_path)]) == 1

    from_settings.assert_not_called()
