"""
MATRIXtools: Natural Language Operations

Turns a free-text description of a transform into a 2x2 matrix, either by
matching a fixed English/Chinese keyword vocabulary locally or by asking an
OpenAI-compatible text-completion service.

Unrecognised text is not an error: the keyword mapper returns None and the
caller decides how to prompt the user. Service faults (network, API, empty
or malformed replies) are raised as RemoteServiceError / MatrixParseError
and never retried here.

"""

import asyncio
import logging
from typing import Optional
from openai import AsyncOpenAI, OpenAIError
from .config import AIConfig
from .constants import *
from .core_functions import *
from ..transforms.constants import PRESET_TRANSFORMS
from ..transforms.operations import TransformOperations
from ...exceptions import RemoteServiceError
from ...matrix_types import Matrix2x2, matrix2x2

logger = logging.getLogger(__name__)


class NaturalLanguageOperations:
    """
    A class to map natural-language descriptions onto 2x2 matrices.
    """

    def __init__(
        self,
        use_numba: bool = True) -> None:
        self.transform_ops = TransformOperations(
            use_numba=use_numba)


    def mock_parse(
        self,
        text: str) -> Optional[Matrix2x2]:
        """
        Map text onto a transform with local keyword rules.

        Rules, tried in order on the lower-cased text:
            rotate / 旋转 / 转 + integer      -> rotation by that many degrees
            reflect / 反射 / 镜像 + x or y    -> reflection across that axis
            scale / 缩放 / 放大 / 缩小 + number -> uniform scaling
            shear / 剪切 / 错切 + number       -> horizontal shear
            squeeze / 挤压                    -> diag(2, 0.5)

        Returns:
            The matrix, or None when no rule matches.
        """
        lower = text.lower().strip()

        if contains_any(lower, ROTATE_KEYWORDS):
            degrees = first_integer(lower)
            if degrees is not None:
                logger.debug("rotate rule matched: %d degrees", degrees)
                return self.transform_ops.rotation_matrix(degrees)

        if contains_any(lower, REFLECT_KEYWORDS):
            if X_AXIS_PATTERN.search(lower):
                logger.debug("reflect rule matched: x axis")
                return PRESET_TRANSFORMS["reflect_x"]
            if Y_AXIS_PATTERN.search(lower):
                logger.debug("reflect rule matched: y axis")
                return PRESET_TRANSFORMS["reflect_y"]

        if contains_any(lower, SCALE_KEYWORDS):
            factor = first_number(lower)
            if factor is not None:
                logger.debug("scale rule matched: factor %g", factor)
                return self.transform_ops.scale_matrix(factor, factor)

        if contains_any(lower, SHEAR_KEYWORDS):
            factor = first_number(lower)
            if factor is not None:
                logger.debug("shear rule matched: factor %g", factor)
                return self.transform_ops.shear_matrix(factor, 0.0)

        if contains_any(lower, SQUEEZE_KEYWORDS):
            logger.debug("squeeze rule matched")
            return PRESET_TRANSFORMS["squeeze"]

        logger.debug("no keyword rule matched %r", text)
        return None


    def parse_matrix_reply(
        self,
        content: str) -> Matrix2x2:
        """
        Read a service reply as a 2x2 matrix.

        Raises:
            MatrixParseError: the reply is not a JSON 2x2 list of numbers
        """
        return matrix2x2(parse_matrix_reply_core(content))


    async def parse_with_ai(
        self,
        text: str,
        config: AIConfig,
        client: Optional[AsyncOpenAI] = None) -> Matrix2x2:
        """
        Ask a chat completions endpoint to turn text into a 2x2 matrix.

        Args:
            text: the user's description
            config: endpoint settings
            client: an existing AsyncOpenAI client; one is created from
                `config` (and closed afterwards) when omitted

        Raises:
            RemoteServiceError: missing key, request failure or empty reply
            MatrixParseError: the reply is not a 2x2 matrix
        """
        if not config.api_key:
            raise RemoteServiceError("API key is not set")

        owns_client = client is None
        if owns_client:
            client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout)

        logger.debug("requesting matrix from %s (model %s)", config.base_url, config.model)
        try:
            response = await client.chat.completions.create(
                model=config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
                temperature=config.temperature)
        except OpenAIError as error:
            logger.error("text-completion request failed: %s", error)
            raise RemoteServiceError(f"API request failed: {error}") from error
        finally:
            if owns_client:
                await client.close()

        content = None
        if response.choices:
            content = response.choices[0].message.content
        content = content.strip() if content else ""
        if not content:
            raise RemoteServiceError("API returned an empty reply")

        logger.debug("service reply: %s", content)
        return self.parse_matrix_reply(content)


    def parse(
        self,
        text: str,
        config: Optional[AIConfig] = None,
        client: Optional[AsyncOpenAI] = None) -> Optional[Matrix2x2]:
        """
        Keyword rules first; the remote service is only asked when the rules
        find nothing and a config is given. Blocking.
        """
        matrix = self.mock_parse(text)
        if matrix is not None or config is None:
            return matrix
        return asyncio.run(self.parse_with_ai(text, config, client=client))


_default_ops = NaturalLanguageOperations()


def mock_parse_natural_language(
    text: str) -> Optional[Matrix2x2]:
    """Module-level shortcut for NaturalLanguageOperations().mock_parse"""
    return _default_ops.mock_parse(text)


async def parse_natural_language_with_ai(
    text: str,
    config: AIConfig,
    client: Optional[AsyncOpenAI] = None) -> Matrix2x2:
    """Module-level shortcut for NaturalLanguageOperations().parse_with_ai"""
    return await _default_ops.parse_with_ai(text, config, client=client)
