"""Closed registry of page style targets and how each derives its values from a theme."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Tuple

from ..theme.models import ColorTuple, Theme, require_complete

Composer = Callable[[Theme], str]


class StyleTarget(str, Enum):
    """Every category of page element the rotation recolors."""

    ROOT_VARIABLES = "root-variables"
    PAGE_BACKGROUND = "page-background"
    PRIMARY_SECTIONS = "primary-sections"
    SECONDARY_SECTIONS = "secondary-sections"
    NAVIGATION = "navigation"
    FOOTER = "footer"
    GLOW_ORBS = "glow-orbs"
    PARTICLES = "particles"
    HIGHLIGHT_TAGS = "highlight-tags"
    INTRO_GREETING = "intro-greeting"
    SECTION_TITLES = "section-titles"
    SECTION_TITLE_UNDERLINE = "section-title-underline"
    LOGO = "logo"
    ACTIVE_NAV_LINK = "active-nav-link"
    TAGS = "tags"
    TAG_SPORTS = "tag-sports"
    TAG_LEISURE = "tag-leisure"
    TAG_TECH = "tag-tech"
    TAG_FRIENDLY = "tag-friendly"
    CARDS = "cards"
    CARD_ICONS = "card-icons"
    ICON_SPORTS = "icon-sports"
    ICON_LEISURE = "icon-leisure"
    ICON_TECH = "icon-tech"
    TRAIT_ICON_FRIENDLY = "trait-icon-friendly"
    TRAIT_ICON_PATIENT = "trait-icon-patient"
    TRAIT_ICON_CARING = "trait-icon-caring"
    TRAIT_ICON_CURIOUS = "trait-icon-curious"
    CONTACT_ICON_WECHAT = "contact-icon-wechat"
    CONTACT_ICON_GITHUB = "contact-icon-github"
    CONTACT_ICON_EMAIL = "contact-icon-email"
    BUTTONS = "buttons"
    CHAT_BUTTON = "chat-button"
    FOOTER_TITLE = "footer-title"
    CONTACT_CARD_TEXT = "contact-card-text"
    SOCIAL_LINKS = "social-links"
    FORM_INPUTS = "form-inputs"
    SCROLLBAR = "scrollbar"
    HOBBY_ITEMS = "hobby-items"
    CRITERIA_ICONS = "criteria-icons"


@dataclass(frozen=True, slots=True)
class StyleBinding:
    """One style property of a target and the function producing its value."""

    prop: str
    compose: Composer
    selector: str | None = None


@dataclass(frozen=True, slots=True)
class TargetSpec:
    selector: str
    bindings: Tuple[StyleBinding, ...]


@dataclass(frozen=True, slots=True)
class StyleUpdate:
    """A single value pushed to the rendering surface."""

    target: StyleTarget
    selector: str
    prop: str
    value: str

    @property
    def key(self) -> Tuple[StyleTarget, str, str]:
        return (self.target, self.selector, self.prop)


def _rgb(color: ColorTuple) -> str:
    return ", ".join(str(channel) for channel in color)


def _rgba(color: ColorTuple, alpha: float) -> str:
    return f"rgba({_rgb(color)}, {alpha:g})"


def _wash(color: ColorTuple, start: float, end: float) -> str:
    return f"linear-gradient(135deg, {_rgba(color, start)} 0%, {_rgba(color, end)} 100%)"


def _glow(color: ColorTuple, radius: int) -> str:
    return f"0 0 {radius}px {_rgba(color, 0.3)}"


def _badge(pick: Callable[[Theme], ColorTuple], text: Callable[[Theme], str]) -> Tuple[StyleBinding, ...]:
    return (
        StyleBinding("background", lambda t: _wash(pick(t), 0.2, 0.1)),
        StyleBinding("border-color", lambda t: _rgba(pick(t), 0.3)),
        StyleBinding("color", text),
    )


def _icon(pick: Callable[[Theme], ColorTuple], radius: int) -> Tuple[StyleBinding, ...]:
    return (
        StyleBinding("background", lambda t: _wash(pick(t), 0.3, 0.1)),
        StyleBinding("box-shadow", lambda t: _glow(pick(t), radius)),
    )


def _primary(theme: Theme) -> ColorTuple:
    return theme.primary_rgb


def _secondary(theme: Theme) -> ColorTuple:
    return theme.secondary_rgb


def _accent(theme: Theme) -> ColorTuple:
    return theme.accent_rgb


_REGISTRY: Dict[StyleTarget, TargetSpec] = {
    StyleTarget.ROOT_VARIABLES: TargetSpec(
        ":root",
        (
            StyleBinding("--color-primary", lambda t: t.primary),
            StyleBinding("--color-primary-light", lambda t: t.primary_light),
            StyleBinding("--color-primary-rgb", lambda t: _rgb(t.primary_rgb)),
            StyleBinding("--color-secondary", lambda t: t.secondary),
            StyleBinding("--color-secondary-rgb", lambda t: _rgb(t.secondary_rgb)),
            StyleBinding("--color-accent", lambda t: t.accent),
            StyleBinding("--color-accent-rgb", lambda t: _rgb(t.accent_rgb)),
            StyleBinding("--gradient-primary", lambda t: t.gradient),
            StyleBinding("--shadow-glow", lambda t: _glow(t.primary_rgb, 30)),
            StyleBinding("--color-background", lambda t: t.bg_color_1),
            StyleBinding("--color-background-secondary", lambda t: t.bg_color_2),
            StyleBinding("--bg-color-3", lambda t: t.bg_color_3),
            StyleBinding("--glass-border", lambda t: _rgba(t.primary_rgb, 0.2)),
            StyleBinding("--bg-gradient", lambda t: t.bg_gradient),
            StyleBinding("--section-gradient-1", lambda t: t.section_gradient_1),
            StyleBinding("--section-gradient-2", lambda t: t.section_gradient_2),
            StyleBinding("--nav-gradient", lambda t: t.nav_gradient),
            StyleBinding("--glow-color-1", lambda t: t.glow_color_1),
            StyleBinding("--glow-color-2", lambda t: t.glow_color_2),
            StyleBinding("--glow-color-3", lambda t: t.glow_color_3),
        ),
    ),
    StyleTarget.PAGE_BACKGROUND: TargetSpec(
        "body", (StyleBinding("background-color", lambda t: t.bg_color_1),)
    ),
    StyleTarget.PRIMARY_SECTIONS: TargetSpec(
        ".introduction-section, .traits-section",
        (StyleBinding("background-color", lambda t: t.bg_color_1),),
    ),
    StyleTarget.SECONDARY_SECTIONS: TargetSpec(
        ".hobbies-section, .friendship-section, .contact-section",
        (StyleBinding("background-color", lambda t: t.bg_color_2),),
    ),
    StyleTarget.NAVIGATION: TargetSpec(
        ".site-header",
        (
            StyleBinding("background-color", lambda t: _rgba(t.primary_rgb, 0.15)),
            StyleBinding(
                "background-image",
                lambda t: f"linear-gradient(135deg, {_rgba(t.primary_rgb, 0.2)} 0%, "
                f"{_rgba(t.secondary_rgb, 0.15)} 100%)",
            ),
            StyleBinding("border-bottom-color", lambda t: _rgba(t.primary_rgb, 0.2)),
        ),
    ),
    StyleTarget.FOOTER: TargetSpec(
        ".site-footer",
        (
            StyleBinding("background", lambda t: f"linear-gradient(180deg, {t.bg_color_2} 0%, {t.bg_color_3} 100%)"),
            StyleBinding("border-top-color", lambda t: _rgba(t.primary_rgb, 0.2)),
        ),
    ),
    StyleTarget.GLOW_ORBS: TargetSpec(
        ".glow-orb",
        (
            StyleBinding("background", lambda t: t.glow_color_1, ".glow-orb:nth-of-type(1)"),
            StyleBinding("background", lambda t: t.glow_color_2, ".glow-orb:nth-of-type(2)"),
            StyleBinding("background", lambda t: t.glow_color_3, ".glow-orb:nth-of-type(3)"),
        ),
    ),
    StyleTarget.PARTICLES: TargetSpec(
        ".particle",
        (
            StyleBinding("background", lambda t: t.primary, ".particle:nth-child(4n+1)"),
            StyleBinding("background", lambda t: t.secondary, ".particle:nth-child(4n+2)"),
            StyleBinding("background", lambda t: t.accent, ".particle:nth-child(4n+3)"),
            StyleBinding("background", lambda t: t.primary_light, ".particle:nth-child(4n+4)"),
        ),
    ),
    StyleTarget.HIGHLIGHT_TAGS: TargetSpec(".highlight-tag", (StyleBinding("color", lambda t: t.primary_light),)),
    StyleTarget.INTRO_GREETING: TargetSpec(
        ".intro-greeting",
        (
            StyleBinding(
                "background",
                lambda t: f"linear-gradient(135deg, #fff 0%, {t.primary_light} 50%, {t.accent} 100%)",
            ),
        ),
    ),
    StyleTarget.SECTION_TITLES: TargetSpec(
        ".section-title",
        (StyleBinding("background", lambda t: f"linear-gradient(135deg, #fff 0%, {t.primary_light} 100%)"),),
    ),
    StyleTarget.SECTION_TITLE_UNDERLINE: TargetSpec(
        ".section-title::after", (StyleBinding("background", lambda t: t.gradient),)
    ),
    StyleTarget.LOGO: TargetSpec(".logo-link", (StyleBinding("background", lambda t: t.gradient),)),
    StyleTarget.ACTIVE_NAV_LINK: TargetSpec(
        ".nav-link.active", (StyleBinding("background-color", lambda t: _rgba(t.primary_rgb, 0.2)),)
    ),
    StyleTarget.TAGS: TargetSpec(".tag", (StyleBinding("border-color", lambda t: _rgba(t.primary_rgb, 0.3)),)),
    StyleTarget.TAG_SPORTS: TargetSpec(".tag-sports", _badge(_secondary, lambda t: t.secondary)),
    StyleTarget.TAG_LEISURE: TargetSpec(".tag-leisure", _badge(_accent, lambda t: t.accent)),
    StyleTarget.TAG_TECH: TargetSpec(".tag-tech", _badge(_primary, lambda t: t.primary_light)),
    StyleTarget.TAG_FRIENDLY: TargetSpec(".tag-friendly", _badge(_accent, lambda t: t.accent)),
    StyleTarget.CARDS: TargetSpec(
        ".hobby-card, .trait-card, .friend-type-card, .contact-card, .criteria-item, "
        ".contact-form-wrapper, .friendship-cta",
        (StyleBinding("border-color", lambda t: _rgba(t.primary_rgb, 0.15)),),
    ),
    StyleTarget.CARD_ICONS: TargetSpec(".hobby-card-icon", _icon(_secondary, 30)),
    StyleTarget.ICON_SPORTS: TargetSpec(".icon-sports", _icon(_secondary, 30)),
    StyleTarget.ICON_LEISURE: TargetSpec(".icon-leisure", _icon(_accent, 30)),
    StyleTarget.ICON_TECH: TargetSpec(".icon-tech, .icon-tech-partner", _icon(_primary, 30)),
    StyleTarget.TRAIT_ICON_FRIENDLY: TargetSpec(".icon-friendly", _icon(_accent, 40)),
    StyleTarget.TRAIT_ICON_PATIENT: TargetSpec(".icon-patient, .icon-play-partner", _icon(_secondary, 40)),
    StyleTarget.TRAIT_ICON_CARING: TargetSpec(".icon-caring", _icon(_accent, 40)),
    StyleTarget.TRAIT_ICON_CURIOUS: TargetSpec(".icon-curious", _icon(_secondary, 40)),
    StyleTarget.CONTACT_ICON_WECHAT: TargetSpec(".icon-wechat", _icon(_secondary, 30)),
    StyleTarget.CONTACT_ICON_GITHUB: TargetSpec(".icon-github", _icon(_primary, 30)),
    StyleTarget.CONTACT_ICON_EMAIL: TargetSpec(".icon-email", _icon(_accent, 30)),
    StyleTarget.BUTTONS: TargetSpec(
        ".cta-button, .form-submit, .modal-btn-primary", (StyleBinding("background", lambda t: t.gradient),)
    ),
    StyleTarget.CHAT_BUTTON: TargetSpec(".intro-chat-btn", (StyleBinding("--btn-gradient", lambda t: t.gradient),)),
    StyleTarget.FOOTER_TITLE: TargetSpec(".footer-title", (StyleBinding("background", lambda t: t.gradient),)),
    StyleTarget.CONTACT_CARD_TEXT: TargetSpec(
        ".contact-card-hint, .contact-card-value", (StyleBinding("color", lambda t: t.primary_light),)
    ),
    StyleTarget.SOCIAL_LINKS: TargetSpec(
        ".social-link", (StyleBinding("border-color", lambda t: _rgba(t.primary_rgb, 0.2)),)
    ),
    StyleTarget.FORM_INPUTS: TargetSpec(
        ".form-input, .form-textarea", (StyleBinding("border-color", lambda t: _rgba(t.primary_rgb, 0.2)),)
    ),
    StyleTarget.SCROLLBAR: TargetSpec(":root", (StyleBinding("--scrollbar-color", lambda t: t.primary),)),
    StyleTarget.HOBBY_ITEMS: TargetSpec(
        ".hobby-item", (StyleBinding("--hover-bg", lambda t: _rgba(t.primary_rgb, 0.1)),)
    ),
    StyleTarget.CRITERIA_ICONS: TargetSpec(
        ".criteria-icon", (StyleBinding("filter", lambda t: f"drop-shadow(0 0 10px {_rgba(t.primary_rgb, 0.3)})"),)
    ),
}


def _check_registry(registry: Mapping[StyleTarget, TargetSpec]) -> None:
    missing = [target.name for target in StyleTarget if not registry.get(target, TargetSpec("", ())).bindings]
    if missing:
        raise RuntimeError(f"Style targets without bindings: {', '.join(missing)}")
    seen: set[Tuple[StyleTarget, str, str]] = set()
    for target, spec in registry.items():
        for binding in spec.bindings:
            key = (target, binding.selector or spec.selector, binding.prop)
            if key in seen:
                raise RuntimeError(f"Duplicate style binding {key!r}")
            seen.add(key)


_check_registry(_REGISTRY)


def target_spec(target: StyleTarget) -> TargetSpec:
    return _REGISTRY[target]


def registry_keys() -> List[Tuple[StyleTarget, str, str]]:
    """Every addressable ``(target, selector, property)`` in registry order."""

    return [
        (target, binding.selector or spec.selector, binding.prop)
        for target, spec in _REGISTRY.items()
        for binding in spec.bindings
    ]


def compose_styles(theme: Theme) -> List[StyleUpdate]:
    """Derive one :class:`StyleUpdate` per registry entry for ``theme``.

    Raises :class:`~huecycle.theme.models.IncompleteThemeError` before any value
    is produced when the theme lacks a required field.
    """

    require_complete(theme)
    updates: List[StyleUpdate] = []
    for target, spec in _REGISTRY.items():
        for binding in spec.bindings:
            updates.append(
                StyleUpdate(
                    target=target,
                    selector=binding.selector or spec.selector,
                    prop=binding.prop,
                    value=binding.compose(theme),
                )
            )
    return updates


__all__ = [
    "StyleBinding",
    "StyleTarget",
    "StyleUpdate",
    "TargetSpec",
    "compose_styles",
    "registry_keys",
    "target_spec",
]
