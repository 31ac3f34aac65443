"""SourceKit documentation oracle bound through ctypes.

Sends `source.request.cursorinfo` requests, the same request Xcode issues when
a symbol is Option-clicked, and reads the `key.doc.full_as_xml` field of the
response. Because the request resolves any symbol under the cursor, responses
may describe declarations from other files or modules; filtering is left to
the caller.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import sys
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from docmark.core.exceptions import OracleUnavailableError
from docmark.core.types.common import ArgumentList
from docmark.interfaces.oracle_provider import OracleProvider, OracleResponse

_MACOS_LIBRARY_PATHS = (
    Path(
        "/Applications/Xcode.app/Contents/Developer/Toolchains/"
        "XcodeDefault.xctoolchain/usr/lib/sourcekitd.framework/sourcekitd"
    ),
)
_LINUX_LIBRARY_NAMES = ("sourcekitdInProc", "sourcekitd")

REQUEST_CURSOR_INFO = "source.request.cursorinfo"
KEY_REQUEST = "key.request"
KEY_COMPILER_ARGS = "key.compilerargs"
KEY_SOURCE_FILE = "key.sourcefile"
KEY_OFFSET = "key.offset"
KEY_DOC_FULL_AS_XML = "key.doc.full_as_xml"

# SOURCEKITD_ARRAY_APPEND
_ARRAY_APPEND = ctypes.c_size_t(-1).value


class _Variant(ctypes.Structure):
    """sourcekitd_variant_t, passed and returned by value."""

    _fields_ = [("data", ctypes.c_uint64 * 3)]


def resolve_library_path(configured: Path | None = None) -> str | None:
    """Locate the sourcekitd library.

    Lookup order: configured path, then platform defaults. Returns None when
    nothing is found.
    """
    if configured is not None:
        return str(configured)

    if sys.platform == "darwin":
        for candidate in _MACOS_LIBRARY_PATHS:
            if candidate.exists():
                return str(candidate)
        return None

    for name in _LINUX_LIBRARY_NAMES:
        found = ctypes.util.find_library(name)
        if found:
            return found
    return None


def _bind(lib: ctypes.CDLL) -> None:
    """Declare the signatures of the sourcekitd C functions docmark calls."""
    c_void_p = ctypes.c_void_p

    lib.sourcekitd_initialize.argtypes = []
    lib.sourcekitd_initialize.restype = None

    lib.sourcekitd_uid_get_from_cstr.argtypes = [ctypes.c_char_p]
    lib.sourcekitd_uid_get_from_cstr.restype = c_void_p

    lib.sourcekitd_request_dictionary_create.argtypes = [
        c_void_p,
        c_void_p,
        ctypes.c_size_t,
    ]
    lib.sourcekitd_request_dictionary_create.restype = c_void_p
    lib.sourcekitd_request_dictionary_set_uid.argtypes = [c_void_p, c_void_p, c_void_p]
    lib.sourcekitd_request_dictionary_set_uid.restype = None
    lib.sourcekitd_request_dictionary_set_string.argtypes = [
        c_void_p,
        c_void_p,
        ctypes.c_char_p,
    ]
    lib.sourcekitd_request_dictionary_set_string.restype = None
    lib.sourcekitd_request_dictionary_set_int64.argtypes = [
        c_void_p,
        c_void_p,
        ctypes.c_int64,
    ]
    lib.sourcekitd_request_dictionary_set_int64.restype = None
    lib.sourcekitd_request_dictionary_set_value.argtypes = [
        c_void_p,
        c_void_p,
        c_void_p,
    ]
    lib.sourcekitd_request_dictionary_set_value.restype = None

    lib.sourcekitd_request_array_create.argtypes = [c_void_p, ctypes.c_size_t]
    lib.sourcekitd_request_array_create.restype = c_void_p
    lib.sourcekitd_request_array_set_string.argtypes = [
        c_void_p,
        ctypes.c_size_t,
        ctypes.c_char_p,
    ]
    lib.sourcekitd_request_array_set_string.restype = None

    lib.sourcekitd_request_release.argtypes = [c_void_p]
    lib.sourcekitd_request_release.restype = None

    lib.sourcekitd_send_request_sync.argtypes = [c_void_p]
    lib.sourcekitd_send_request_sync.restype = c_void_p
    lib.sourcekitd_response_is_error.argtypes = [c_void_p]
    lib.sourcekitd_response_is_error.restype = ctypes.c_bool
    lib.sourcekitd_response_get_value.argtypes = [c_void_p]
    lib.sourcekitd_response_get_value.restype = _Variant
    lib.sourcekitd_response_dispose.argtypes = [c_void_p]
    lib.sourcekitd_response_dispose.restype = None

    lib.sourcekitd_variant_dictionary_get_string.argtypes = [_Variant, c_void_p]
    lib.sourcekitd_variant_dictionary_get_string.restype = ctypes.c_char_p


class SourceKitdProvider(OracleProvider):
    """OracleProvider backed by the in-process sourcekitd library."""

    # sourcekitd offsets are UTF-8 byte offsets
    offset_encoding = "utf-8"

    def __init__(self, library_path: Path | None = None):
        """Initialize the provider without loading the library.

        Args:
            library_path: Explicit sourcekitd library; platform lookup when None
        """
        self._library_path = library_path
        self._lib: ctypes.CDLL | None = None
        self._uids: dict[str, int] = {}
        # Compiler argument arrays are built once per argument list
        self._argument_arrays: dict[ArgumentList, int] = {}
        self._request: int | None = None
        self._request_file: str | None = None
        self._request_arguments: ArgumentList | None = None

    def initialize(self) -> None:
        path = resolve_library_path(self._library_path)
        if path is None:
            raise OracleUnavailableError(
                "sourcekitd library not found; pass --sourcekitd or set "
                "DOCMARK_ORACLE__LIBRARY_PATH"
            )

        try:
            lib = ctypes.CDLL(path)
            _bind(lib)
        except (OSError, AttributeError) as e:
            raise OracleUnavailableError(
                f"Could not load sourcekitd from {path}: {e}"
            ) from e

        lib.sourcekitd_initialize()
        self._lib = lib
        logger.debug(f"sourcekitd initialized from {path}")

    def query(
        self, offset: int, file: str, arguments: Sequence[str]
    ) -> OracleResponse:
        lib = self._require_lib()
        request = self._request_for(file, tuple(arguments))
        lib.sourcekitd_request_dictionary_set_int64(
            request, self._uid(KEY_OFFSET), offset
        )

        response = lib.sourcekitd_send_request_sync(request)
        try:
            if lib.sourcekitd_response_is_error(response):
                return OracleResponse.error()
            value = lib.sourcekitd_response_get_value(response)
            raw = lib.sourcekitd_variant_dictionary_get_string(
                value, self._uid(KEY_DOC_FULL_AS_XML)
            )
            xml = raw.decode("utf-8") if raw is not None else None
            return OracleResponse.documentation(xml)
        finally:
            lib.sourcekitd_response_dispose(response)

    def close(self) -> None:
        if self._lib is None:
            return
        if self._request is not None:
            self._lib.sourcekitd_request_release(self._request)
            self._request = None
        for array in self._argument_arrays.values():
            self._lib.sourcekitd_request_release(array)
        self._argument_arrays.clear()

    # ------------------------------------------------------------------#
    def _require_lib(self) -> ctypes.CDLL:
        if self._lib is None:
            raise RuntimeError("SourceKitdProvider used before initialize()")
        return self._lib

    def _uid(self, name: str) -> int:
        uid = self._uids.get(name)
        if uid is None:
            uid = self._require_lib().sourcekitd_uid_get_from_cstr(name.encode("utf-8"))
            self._uids[name] = uid
        return uid

    def _argument_array(self, arguments: ArgumentList) -> int:
        array = self._argument_arrays.get(arguments)
        if array is None:
            lib = self._require_lib()
            array = lib.sourcekitd_request_array_create(None, 0)
            for argument in arguments:
                lib.sourcekitd_request_array_set_string(
                    array, _ARRAY_APPEND, argument.encode("utf-8")
                )
            self._argument_arrays[arguments] = array
        return array

    def _request_for(self, file: str, arguments: ArgumentList) -> int:
        """Return the cursor-info request for a file, reusing it across offsets."""
        if (
            self._request is not None
            and self._request_file == file
            and self._request_arguments == arguments
        ):
            return self._request

        lib = self._require_lib()
        if self._request is not None:
            lib.sourcekitd_request_release(self._request)

        request = lib.sourcekitd_request_dictionary_create(None, None, 0)
        lib.sourcekitd_request_dictionary_set_uid(
            request, self._uid(KEY_REQUEST), self._uid(REQUEST_CURSOR_INFO)
        )
        lib.sourcekitd_request_dictionary_set_value(
            request, self._uid(KEY_COMPILER_ARGS), self._argument_array(arguments)
        )
        lib.sourcekitd_request_dictionary_set_string(
            request, self._uid(KEY_SOURCE_FILE), file.encode("utf-8")
        )
        self._request = request
        self._request_file = file
        self._request_arguments = arguments
        return request
