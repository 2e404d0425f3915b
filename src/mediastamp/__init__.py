# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""mediastamp - Timestamp-based renamer for photo and video collections."""

from mediastamp.__about__ import __version__

__all__ = ["__version__"]
