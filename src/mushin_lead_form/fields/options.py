"""Choices offered on the property-details, timeline and contact steps."""

from .base import Option

PROPERTY_CONDITION_OPTIONS = [
    Option("excellent", "Excellent", "Move-in ready, recently updated"),
    Option("good", "Good", "Minor cosmetic work needed"),
    Option("fair", "Fair", "Needs some repairs or updating"),
    Option("poor", "Poor", "Needs major repairs"),
    Option("distressed", "Distressed", "Fire, water or structural damage"),
]

TIMEFRAME_OPTIONS = [
    Option("asap", "As soon as possible", "Close in as little as 7 days"),
    Option("30-days", "Within 30 days"),
    Option("60-days", "Within 60 days"),
    Option("90-days", "Within 90 days"),
    Option("flexible", "I'm flexible", "Just exploring my options"),
]

REFERRAL_SOURCE_OPTIONS = [
    Option("google", "Google search"),
    Option("facebook", "Facebook"),
    Option("mail", "Direct mail"),
    Option("sign", "Bandit sign"),
    Option("referral", "Friend or family"),
    Option("other", "Other"),
]
