from linkextractor.config.settings import settings
from linkextractor.extractor.link_extractor import LinkExtractor


def test_default_parser_is_used(monkeypatch):
    monkeypatch.setattr(settings.PARSER, "FEATURES", "html.parser")

    extractor = LinkExtractor.from_html('<img src="pic.png">', "https://example.com/")

    assert extractor.document.builder.NAME == "html.parser"
    assert extractor.extract() == ("https://example.com/pic.png",)
