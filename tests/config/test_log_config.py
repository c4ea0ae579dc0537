from loguru import logger

from linkextractor.config.log_config import PACKAGE, configure_logging
from linkextractor.extractor.link_extractor import LinkExtractor


def test_package_records_are_emitted_once_configured():
    messages = []

    configure_logging(log_level="DEBUG", enable_json=False)
    sink_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    try:
        LinkExtractor.from_html('<a href="http://[::1">x</a>', "https://example.com/").extract()
    finally:
        logger.remove(sink_id)
        logger.disable(PACKAGE)

    unresolvable = [record for record in messages if "unresolvable link" in record["message"]]
    assert len(unresolvable) == 1
    assert unresolvable[0]["extra"]["component"] == "LinkExtractor"


def test_package_is_silent_by_default():
    messages = []
    logger.disable(PACKAGE)
    sink_id = logger.add(lambda message: messages.append(message), level="TRACE")
    try:
        LinkExtractor.from_html('<a href="http://[::1">x</a>').extract()
    finally:
        logger.remove(sink_id)

    assert messages == []
