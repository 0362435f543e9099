"""Legacy docs URL redirect table.

Maps renamed or restructured documentation paths to their current location.
Targets may carry an in-page fragment (``/guides/quickstart#more-complexity``).

Lookup is a single exact, case-sensitive hop: chains are never followed.
The table is built once at import from an ordered tuple of pairs so that a
duplicated key fails loudly instead of silently overwriting an earlier entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from core import get_logger

logger = get_logger(__name__)


class DuplicateRedirectError(ValueError):
    """Raised when the same legacy path is registered twice."""

    def __init__(self, path: str, first_target: str, second_target: str) -> None:
        self.path = path
        self.first_target = first_target
        self.second_target = second_target
        super().__init__(
            f"Duplicate redirect for {path!r}: "
            f"{first_target!r} and {second_target!r}"
        )


class InvalidRedirectTableError(ValueError):
    """Raised when a redirect table fails validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(
            f"{len(errors)} invalid redirect(s): " + "; ".join(errors)
        )


@dataclass(frozen=True)
class RedirectEntry:
    """A single legacy path -> current path pair."""

    old_path: str
    new_path: str

    @property
    def target_path(self) -> str:
        """The target without its fragment."""
        return self.new_path.partition("#")[0]

    @property
    def fragment(self) -> str | None:
        _, sep, fragment = self.new_path.partition("#")
        return fragment if sep else None


class RedirectTable(Mapping[str, str]):
    """Immutable, read-only mapping of legacy path -> redirect target.

    Safe to share across request handlers: there are no mutators.
    """

    __slots__ = ("_entries", "_map")

    def __init__(self, entries: Iterable[RedirectEntry] = ()) -> None:
        mapping: dict[str, str] = {}
        ordered: list[RedirectEntry] = []
        for entry in entries:
            existing = mapping.get(entry.old_path)
            if existing is not None:
                raise DuplicateRedirectError(entry.old_path, existing, entry.new_path)
            mapping[entry.old_path] = entry.new_path
            ordered.append(entry)
        self._map = MappingProxyType(mapping)
        self._entries = tuple(ordered)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> RedirectTable:
        return cls(RedirectEntry(old, new) for old, new in pairs)

    def lookup(self, path: str) -> str | None:
        """Return the redirect target for ``path``, or None if it is not a legacy path."""
        return self._map.get(path)

    def entries(self) -> tuple[RedirectEntry, ...]:
        """All entries in authoring order."""
        return self._entries

    def __getitem__(self, path: str) -> str:
        return self._map[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, path: object) -> bool:
        return path in self._map

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"


@dataclass
class RedirectAudit:
    """Result of auditing a redirect table."""

    errors: list[str] = field(default_factory=list)
    chains: list[tuple[str, str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_redirects(table: RedirectTable) -> list[str]:
    """Return a list of human-readable problems with ``table`` (empty if valid).

    Checks:
    - keys are bare paths: leading ``/``, no query, fragment, or scheme
    - keys have no trailing slash (other than ``/`` itself)
    - targets are site-relative paths
    - no entry redirects to itself, fragment or not
    - no two entries redirect to each other
    """
    errors: list[str] = []
    for entry in table.entries():
        old, new = entry.old_path, entry.new_path
        if not old.startswith("/"):
            errors.append(f"{old!r}: legacy path must start with '/'")
        if any(token in old for token in ("?", "#", "://")):
            errors.append(f"{old!r}: legacy path must not contain a query or fragment")
        if old != "/" and old.endswith("/"):
            errors.append(f"{old!r}: legacy path must not end with '/'")
        if not new.startswith("/"):
            errors.append(f"{old!r}: target {new!r} must start with '/'")
        if old == entry.target_path:
            errors.append(f"{old!r}: redirects to itself")
            continue

        back = table.lookup(entry.target_path)
        # Report each cycle once, from the lexically smaller side.
        if back is not None and back.partition("#")[0] == old and old < entry.target_path:
            errors.append(f"{old!r} <-> {entry.target_path!r}: redirect cycle")
    return errors


def find_redirect_chains(table: RedirectTable) -> list[tuple[str, str, str]]:
    """Find entries whose target is itself a legacy path.

    Returns ``(old_path, intermediate, final)`` triples. These are two-hop
    redirects for the client; they are reported, never collapsed.
    """
    chains: list[tuple[str, str, str]] = []
    for entry in table.entries():
        intermediate = entry.target_path
        if intermediate == entry.old_path:
            continue
        final = table.lookup(intermediate)
        if final is not None and final.partition("#")[0] != entry.old_path:
            chains.append((entry.old_path, intermediate, final))
    return chains


def audit_redirects(table: RedirectTable) -> RedirectAudit:
    """Validate ``table`` and collect redirect chains, logging what it finds."""
    audit = RedirectAudit(
        errors=validate_redirects(table),
        chains=find_redirect_chains(table),
    )
    for error in audit.errors:
        logger.error("redirects.audit.invalid", error=error)
    for old_path, intermediate, final in audit.chains:
        logger.warning(
            "redirects.audit.chain",
            old_path=old_path,
            intermediate=intermediate,
            final=final,
        )
    logger.info(
        "redirects.audit.complete",
        entries=len(table),
        errors=len(audit.errors),
        chains=len(audit.chains),
    )
    return audit


def build_redirect_table(pairs: Iterable[tuple[str, str]]) -> RedirectTable:
    """Build and validate a table; raise on duplicates or invalid entries."""
    table = RedirectTable.from_pairs(pairs)
    errors = validate_redirects(table)
    if errors:
        raise InvalidRedirectTableError(errors)
    return table


# Old docs URLs -> current pages. Kebab-case and snake_case variants of the same
# guide are both listed; matching is case-sensitive.
LEGACY_REDIRECTS: tuple[tuple[str, str], ...] = (
    ("/guides/creating-a-new-component", "/guides/five-minute-guide"),
    ("/controlling-layout", "/guides/controlling-layout"),
    ("/state-in-blocks", "/guides/state-in-blocks"),
    ("/custom-CSS-and-JS", "/guides/custom-CSS-and-JS"),
    ("/blocks-and-event-listeners", "/guides/blocks-and-event-listeners"),
    ("/using-blocks-like-functions", "/guides/using-blocks-like-functions"),
    ("/using-flagging", "/guides/using-flagging"),
    ("/named-entity-recognition", "/guides/named-entity-recognition"),
    ("/real-time-speech-recognition", "/guides/real-time-speech-recognition"),
    ("/eveloping-faster-with-reload-mode", "/guides/eveloping-faster-with-reload-mode"),
    ("/create-your-own-friends-with-a-gan", "/guides/create-your-own-friends-with-a-gan"),
    (
        "/setting-up-a-demo-for-maximum-performance",
        "/guides/setting-up-a-demo-for-maximum-performance",
    ),
    ("/building-a-pictionary-app", "/guides/building-a-pictionary-app"),
    ("/creating-a-chatbot", "/guides/creating-a-chatbot"),
    ("/how-to-use-D-model-component", "/guides/how-to-use-D-model-component"),
    ("/creating-a-new-component", "/guides/creating-a-new-component"),
    ("/running-background-tasks", "/guides/running-background-tasks"),
    ("/custom-interpretations-with-blocks", "/guides/custom-interpretations-with-blocks"),
    ("/reactive-interfaces", "/guides/reactive-interfaces"),
    ("/four-kinds-of-interfaces", "/guides/four-kinds-of-interfaces"),
    ("/interface-state", "/guides/interface-state"),
    ("/ore-on-examples", "/guides/ore-on-examples"),
    ("/advanced-interface-features", "/guides/advanced-interface-features"),
    ("/key-features", "/guides/key-features"),
    ("/quickstart", "/guides/quickstart"),
    ("/sharing-your-app", "/guides/sharing-your-app"),
    ("/connecting-to-a-database", "/guides/connecting-to-a-database"),
    (
        "/creating-a-realtime-dashboard-from-google-sheets",
        "/guides/creating-a-realtime-dashboard-from-google-sheets",
    ),
    ("/plot-component-for-maps", "/guides/plot-component-for-maps"),
    (
        "/creating-a-dashboard-from-bigquery-data",
        "/guides/creating-a-dashboard-from-bigquery-data",
    ),
    ("/using-gradio-for-tabular-workflows", "/guides/using-gradio-for-tabular-workflows"),
    ("/image-classification-in-pytorch", "/guides/image-classification-in-pytorch"),
    ("/using-hugging-face-integrations", "/guides/using-hugging-face-integrations"),
    ("/Gradio-and-ONNX-on-Hugging-Face", "/guides/Gradio-and-ONNX-on-Hugging-Face"),
    (
        "/image-classification-with-vision-transformers",
        "/guides/image-classification-with-vision-transformers",
    ),
    ("/Gradio-and-Wandb-Integration", "/guides/Gradio-and-Wandb-Integration"),
    ("/image-classification-in-tensorflow", "/guides/image-classification-in-tensorflow"),
    ("/Gradio-and-Comet", "/guides/Gradio-and-Comet"),
    ("/introduction_to_blocks", "/guides/quickstart#more-complexity"),
    ("/adding_examples_to_your_app", "/guides/key-features#example-inputs"),
    ("/embedding_gradio_demos", "/guides/sharing-your-app#embedding-hosted-spaces"),
    ("/getting_started", "/guides/quickstart"),
    ("/building_with_blocks", "/guides/building-with-blocks"),
    ("/other_tutorials", "/guides/other-tutorials"),
    ("/building_interfaces", "/guides/building-interfaces"),
    ("/tabular_data_science_and_plots", "/guides/tabular-data-science-and-plots"),
    ("/integrating_other_frameworks", "/guides/integrating-other-frameworks"),
    ("/controlling_layout", "/guides/controlling-layout"),
    ("/state_in_blocks", "/guides/state-in-blocks"),
    ("/custom_CSS_and_JS", "/guides/custom-CSS-and-JS"),
    ("/blocks_and_event_listeners", "/guides/blocks-and-event-listeners"),
    ("/using_blocks_like_functions", "/guides/using-blocks-like-functions"),
    ("/using_flagging", "/guides/using-flagging"),
    ("/named_entity_recognition", "/guides/named-entity-recognition"),
    ("/real_time_speech_recognition", "/guides/real-time-speech-recognition"),
    ("/developing_faster_with_reload_mode", "/guides/developing-faster-with-reload-mode"),
    ("/create_your_own_friends_with_a_gan", "/guides/create-your-own-friends-with-a-gan"),
    (
        "/setting_up_a_demo_for_maximum_performance",
        "/guides/setting-up-a-demo-for-maximum-performance",
    ),
    ("/building_a_pictionary_app", "/guides/building-a-pictionary-app"),
    ("/creating_a_chatbot", "/guides/creating-a-chatbot"),
    ("/how_to_use_3D_model_component", "/guides/how-to-use-3D-model-component"),
    ("/creating_a_new_component", "/guides/creating-a-new-component"),
    ("/running_background_tasks", "/guides/running-background-tasks"),
    ("/custom_interpretations_with_blocks", "/guides/custom-interpretations-with-blocks"),
    ("/reactive_interfaces", "/guides/reactive-interfaces"),
    ("/more_on_examples_and_flagging", "/guides/more-on-examples"),
    ("/interface_state", "/guides/interface-state"),
    ("/advanced_interface_features", "/guides/advanced-interface-features"),
    ("/key_features", "/guides/key-features"),
    ("/sharing_your_app", "/guides/sharing-your-app"),
    ("/connecting_to_a_database", "/guides/connecting-to-a-database"),
    (
        "/creating_a_realtime_dashboard_from_google_sheets",
        "/guides/creating-a-realtime-dashboard-from-google-sheets",
    ),
    ("/plot_component_for_maps", "/guides/plot-component-for-maps"),
    (
        "/creating_a_dashboard_from_bigquery_data",
        "/guides/creating-a-dashboard-from-bigquery-data",
    ),
    ("/using_gradio_for_tabular_workflows", "/guides/using-gradio-for-tabular-workflows"),
    ("/image_classification_in_pytorch", "/guides/image-classification-in-pytorch"),
    ("/using_hugging_face_integrations", "/guides/using-hugging-face-integrations"),
    ("/Gradio_and_ONNX_on_Hugging_Face", "/guides/Gradio-and-ONNX-on-Hugging-Face"),
    (
        "/image_classification_with_vision_transformers",
        "/guides/image-classification-with-vision-transformers",
    ),
    ("/Gradio_and_Wandb_Integration", "/guides/Gradio-and-Wandb-Integration"),
    ("/image_classification_in_tensorflow", "/guides/image-classification-in-tensorflow"),
    ("/demos", "/playground"),
)

redirects: RedirectTable = build_redirect_table(LEGACY_REDIRECTS)


def lookup(path: str) -> str | None:
    """Return the current path for a legacy docs path, or None."""
    return redirects.lookup(path)
