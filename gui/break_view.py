"""
AppKit rendering of the break overlay content.

Layout (vertically stacked, centred on screen):
    title, subtitle, countdown ring with the seconds left inside, Skip button

The view is a thin skin over core.countdown.BreakCountdown: it redraws on
the countdown's on_tick and routes the Skip button to countdown.skip().
"""

import logging

import objc  # type: ignore[import-not-found]
from AppKit import (  # type: ignore[import-not-found]
    NSBezierPath,
    NSButton,
    NSColor,
    NSFont,
    NSLayoutAttributeCenterX,
    NSLayoutConstraint,
    NSRoundLineCapStyle,
    NSStackView,
    NSTextAlignmentCenter,
    NSTextField,
    NSUserInterfaceLayoutOrientationVertical,
    NSView,
)
from Foundation import (  # type: ignore[import-not-found]
    NSInsetRect,
    NSMakePoint,
    NSMakeRect,
    NSMidX,
    NSMidY,
    NSObject,
    NSWidth,
)

import config
from core.countdown import BreakCountdown

logger = logging.getLogger(__name__)

NS_BEZEL_STYLE_ROUNDED = 1


class CountdownRingView(NSView):
    """Circular progress ring: a faint full track and a green arc from 12 o'clock."""

    def initWithFrame_(self, frame):
        self = objc.super(CountdownRingView, self).initWithFrame_(frame)
        if self is None:
            return None
        self._progress = 1.0
        return self

    @objc.python_method
    def set_progress(self, progress: float) -> None:
        self._progress = min(max(progress, 0.0), 1.0)
        self.setNeedsDisplay_(True)

    def drawRect_(self, rect):
        bounds = self.bounds()
        inset = config.RING_LINE_WIDTH / 2.0
        circle_rect = NSInsetRect(bounds, inset, inset)

        NSColor.colorWithCalibratedWhite_alpha_(1.0, config.RING_TRACK_ALPHA).setStroke()
        track = NSBezierPath.bezierPathWithOvalInRect_(circle_rect)
        track.setLineWidth_(config.RING_LINE_WIDTH)
        track.stroke()

        if self._progress <= 0.0:
            return

        center = NSMakePoint(NSMidX(bounds), NSMidY(bounds))
        radius = NSWidth(circle_rect) / 2.0
        arc = NSBezierPath.bezierPath()
        arc.appendBezierPathWithArcWithCenter_radius_startAngle_endAngle_clockwise_(
            center, radius, 90.0, 90.0 - 360.0 * self._progress, True
        )
        arc.setLineWidth_(config.RING_LINE_WIDTH)
        arc.setLineCapStyle_(NSRoundLineCapStyle)
        NSColor.systemGreenColor().setStroke()
        arc.stroke()


class _SkipTarget(NSObject):
    """Button target. NSButton keeps its target weakly, BreakView holds this."""

    @objc.python_method
    def bind(self, handler):
        self._handler = handler
        return self

    @objc.IBAction
    def skip_(self, sender):
        self._handler()


def _make_label(text: str, font) -> NSTextField:
    label = NSTextField.labelWithString_(text)
    label.setFont_(font)
    label.setTextColor_(NSColor.whiteColor())
    label.setAlignment_(NSTextAlignmentCenter)
    return label


class BreakView:
    """Builds the overlay's content view for one BreakCountdown."""

    def __init__(self, frame, countdown: BreakCountdown) -> None:
        self.countdown = countdown
        self.view = NSView.alloc().initWithFrame_(frame)

        self.title_label = _make_label(
            config.OVERLAY_TITLE, NSFont.boldSystemFontOfSize_(config.TITLE_FONT_SIZE)
        )
        self.subtitle_label = _make_label(
            config.OVERLAY_SUBTITLE, NSFont.systemFontOfSize_(config.SUBTITLE_FONT_SIZE)
        )

        diameter = config.RING_DIAMETER
        self.ring = CountdownRingView.alloc().initWithFrame_(NSMakeRect(0, 0, diameter, diameter))
        self.ring.setTranslatesAutoresizingMaskIntoConstraints_(False)
        self.count_label = _make_label(
            str(countdown.remaining), NSFont.boldSystemFontOfSize_(config.COUNTDOWN_FONT_SIZE)
        )
        self.count_label.setTranslatesAutoresizingMaskIntoConstraints_(False)
        self.ring.addSubview_(self.count_label)

        self._skip_target = _SkipTarget.alloc().init().bind(countdown.skip)
        self.skip_button = NSButton.buttonWithTitle_target_action_(
            config.OVERLAY_SKIP, self._skip_target, "skip:"
        )
        self.skip_button.setBezelStyle_(NS_BEZEL_STYLE_ROUNDED)
        self.skip_button.setKeyEquivalent_("\r")

        stack = NSStackView.stackViewWithViews_(
            [self.title_label, self.subtitle_label, self.ring, self.skip_button]
        )
        stack.setOrientation_(NSUserInterfaceLayoutOrientationVertical)
        stack.setAlignment_(NSLayoutAttributeCenterX)
        stack.setSpacing_(config.OVERLAY_STACK_SPACING)
        stack.setTranslatesAutoresizingMaskIntoConstraints_(False)
        self.view.addSubview_(stack)

        NSLayoutConstraint.activateConstraints_([
            stack.centerXAnchor().constraintEqualToAnchor_(self.view.centerXAnchor()),
            stack.centerYAnchor().constraintEqualToAnchor_(self.view.centerYAnchor()),
            self.ring.widthAnchor().constraintEqualToConstant_(diameter),
            self.ring.heightAnchor().constraintEqualToConstant_(diameter),
            self.count_label.centerXAnchor().constraintEqualToAnchor_(self.ring.centerXAnchor()),
            self.count_label.centerYAnchor().constraintEqualToAnchor_(self.ring.centerYAnchor()),
        ])

        countdown.on_tick = self.update

    def update(self, remaining: int, progress: float) -> None:
        """Redraw the number and ring after a tick."""
        self.count_label.setStringValue_(str(remaining))
        self.ring.set_progress(progress)

    def teardown(self) -> None:
        """Detach from the countdown so late ticks cannot touch released views."""
        self.countdown.on_tick = None
        self._skip_target.bind(lambda: None)
        logger.debug("Break view torn down")
