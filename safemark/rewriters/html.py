"""raw HTML rewriter."""

import logging
from typing import Union

from safemark.core.models import Html, Text
from safemark.core.tags import is_disallowed
from safemark.rewriters import rewriter

logger = logging.getLogger(__name__)


@rewriter("html")
class HtmlRewriter:  # pylint: disable=too-few-public-methods
    """escapes raw HTML fragments that open or close a disallowed tag."""

    def rewrite(self, node: Html) -> Union[Html, Text]:
        """
        filters a raw HTML fragment.

        Args:
            node: raw HTML node

        Returns:
            text node with the same value if the tag is disallowed,
            otherwise the node unchanged
        """
        if is_disallowed(node.value):
            logger.debug("Escaping disallowed HTML: %.40r", node.value)
            return Text(value=node.value)
        return node
