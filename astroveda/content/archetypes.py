# astroveda/content/archetypes.py
"""Moon-phase archetypes, keyed by phase name."""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from astroveda.core.models import Archetype, LuckyElements, ManifestationPower

ARCHETYPES: Mapping[str, Archetype] = MappingProxyType({
    "New Moon": Archetype(
        personality_type="The Visionary Pioneer",
        traits=("Intuitive", "Spontaneous", "Innocent", "Impulsive", "Courageous"),
        strengths=("Natural initiator", "Fresh perspective", "Childlike wonder", "Fearless exploration"),
        challenges=("Impatience", "Naivety", "Difficulty with completion", "Over-enthusiasm"),
        life_purpose="To plant seeds of new consciousness and inspire fresh beginnings in the world",
        spiritual_path="Embrace the void and trust in new cycles of creation",
        karmic_lesson="Learning to trust intuition over logic and embrace the unknown",
        soul_mission="To bring forth new ideas and inspire transformation in others",
        emotional_nature="Fresh, optimistic, and full of potential energy",
        intuitive_gifts=("Prophecy", "Vision work", "Seed planting intentions", "Pure channeling"),
        relationship_style="Seeks partners who support new beginnings and growth",
        career_guidance="Entrepreneur, innovator, spiritual teacher, artist, pioneer in any field",
        lucky_elements=LuckyElements(
            colors=("White", "Silver", "Black"),
            numbers=(1, 10, 19, 28),
            gemstones=("Moonstone", "Pearl", "Selenite"),
            days=("Monday", "New Moon days"),
        ),
        manifestation_power=ManifestationPower(wealth=85, love=75, career=90, health=70, spiritual=95),
    ),
    "Waxing Crescent": Archetype(
        personality_type="The Ambitious Builder",
        traits=("Determined", "Growth-oriented", "Optimistic", "Action-focused", "Persistent"),
        strengths=("Building momentum", "Taking action", "Overcoming obstacles", "Strategic thinking"),
        challenges=("Impatience with results", "Burnout", "Over-ambition", "Ignoring rest needs"),
        life_purpose="To turn visions into reality through persistent action and growth",
        spiritual_path="Trust the process of gradual expansion and celebrate small wins",
        karmic_lesson="Balancing ambition with patience and sustainable growth",
        soul_mission="To demonstrate that dreams require consistent action to manifest",
        emotional_nature="Hopeful, energetic, and forward-moving",
        intuitive_gifts=("Momentum sensing", "Opportunity recognition", "Growth manifestation", "Strategic foresight"),
        relationship_style="Values partners who share ambitions and support mutual growth",
        career_guidance="Project manager, startup founder, coach, builder, developer",
        lucky_elements=LuckyElements(
            colors=("Light Blue", "Green", "Silver"),
            numbers=(2, 11, 20, 29),
            gemstones=("Aquamarine", "Green Aventurine", "Clear Quartz"),
            days=("Monday", "Thursday"),
        ),
        manifestation_power=ManifestationPower(wealth=80, love=80, career=88, health=75, spiritual=82),
    ),
    "First Quarter": Archetype(
        personality_type="The Determined Warrior",
        traits=("Strong-willed", "Decisive", "Crisis-capable", "Independent", "Resilient"),
        strengths=("Problem-solving", "Overcoming challenges", "Leadership under pressure", "Determination"),
        challenges=("Stubbornness", "Internal conflict", "Difficulty asking for help", "Tendency to struggle alone"),
        life_purpose="To overcome obstacles and teach others resilience through example",
        spiritual_path="Embrace challenges as opportunities for growth and transformation",
        karmic_lesson="Finding balance between independence and collaboration",
        soul_mission="To be a warrior of light who transforms challenges into victories",
        emotional_nature="Intense, focused, and driven by purpose",
        intuitive_gifts=("Crisis management", "Strategic warfare", "Obstacle removal", "Protective energy"),
        relationship_style="Needs partners who respect independence yet offer steady support",
        career_guidance="Crisis manager, strategist, attorney, military, emergency responder",
        lucky_elements=LuckyElements(
            colors=("Red", "Orange", "Steel Gray"),
            numbers=(3, 12, 21, 30),
            gemstones=("Red Jasper", "Carnelian", "Hematite"),
            days=("Tuesday", "Saturday"),
        ),
        manifestation_power=ManifestationPower(wealth=78, love=72, career=92, health=85, spiritual=75),
    ),
    "Waxing Gibbous": Archetype(
        personality_type="The Perfectionist Refiner",
        traits=("Analytical", "Detail-oriented", "Perfectionist", "Methodical", "Improvement-focused"),
        strengths=("Refinement", "Analysis", "Preparation", "Attention to detail", "Excellence pursuit"),
        challenges=("Over-analysis", 'Never feeling "ready"', "Self-criticism", "Postponing action"),
        life_purpose="To refine and perfect systems, ideas, and processes for maximum effectiveness",
        spiritual_path="Learn that perfection is a journey, not a destination",
        karmic_lesson="Balancing excellence with acceptance of imperfection",
        soul_mission="To raise standards and inspire quality in all endeavors",
        emotional_nature="Thoughtful, careful, and precision-focused",
        intuitive_gifts=("Pattern recognition", "Flaw detection", "Optimization insight", "Quality sensing"),
        relationship_style="Seeks depth, loyalty, and partners committed to mutual improvement",
        career_guidance="Editor, quality analyst, researcher, craftsperson, consultant",
        lucky_elements=LuckyElements(
            colors=("Yellow", "Gold", "Earth tones"),
            numbers=(4, 13, 22, 31),
            gemstones=("Citrine", "Tiger's Eye", "Amber"),
            days=("Wednesday", "Sunday"),
        ),
        manifestation_power=ManifestationPower(wealth=83, love=77, career=87, health=80, spiritual=85),
    ),
    "Full Moon": Archetype(
        personality_type="The Illuminated Visionary",
        traits=("Charismatic", "Emotional", "Insightful", "Expressive", "Magnetic"),
        strengths=("High emotional intelligence", "Natural leadership", "Manifestation power", "Inspiration"),
        challenges=("Emotional overwhelm", "Intensity", "Difficulty with boundaries", "Energy depletion"),
        life_purpose="To illuminate truth and inspire others through emotional authenticity",
        spiritual_path="Master emotional energy and become a beacon of light for others",
        karmic_lesson="Managing intensity and learning healthy emotional boundaries",
        soul_mission="To shine brightly and help others find their own light",
        emotional_nature="Intense, radiant, and deeply feeling",
        intuitive_gifts=("Psychic sensitivity", "Energy healing", "Emotional reading", "Divine channeling"),
        relationship_style="All-in, passionate, needs deep soul connections",
        career_guidance="Healer, performer, motivational speaker, therapist, artist",
        lucky_elements=LuckyElements(
            colors=("White", "Silver", "Purple", "Gold"),
            numbers=(5, 14, 23),
            gemstones=("Moonstone", "Labradorite", "Amethyst"),
            days=("Monday", "Full Moon nights"),
        ),
        manifestation_power=ManifestationPower(wealth=90, love=95, career=88, health=78, spiritual=100),
    ),
    "Waning Gibbous": Archetype(
        personality_type="The Wise Teacher",
        traits=("Generous", "Wise", "Grateful", "Sharing", "Reflective"),
        strengths=("Teaching ability", "Gratitude practice", "Sharing wisdom", "Mentorship"),
        challenges=("Over-giving", "Difficulty receiving", "Living through others", "Burnout from service"),
        life_purpose="To share accumulated wisdom and help others on their journey",
        spiritual_path="Embrace the role of teacher while remaining a humble student",
        karmic_lesson="Learning to receive as graciously as you give",
        soul_mission="To be a bridge between knowledge and those seeking enlightenment",
        emotional_nature="Grateful, generous, and sharing",
        intuitive_gifts=("Teaching channeling", "Wisdom transmission", "Gratitude manifestation", "Energy sharing"),
        relationship_style="Nurturing, supportive, seeks to uplift partners",
        career_guidance="Teacher, mentor, counselor, guide, author, philosopher",
        lucky_elements=LuckyElements(
            colors=("Blue", "Indigo", "Silver"),
            numbers=(6, 15, 24),
            gemstones=("Sapphire", "Lapis Lazuli", "Sodalite"),
            days=("Thursday", "Friday"),
        ),
        manifestation_power=ManifestationPower(wealth=75, love=88, career=82, health=85, spiritual=92),
    ),
    "Last Quarter": Archetype(
        personality_type="The Sacred Transformer",
        traits=("Introspective", "Transformative", "Releasing", "Deep", "Mystical"),
        strengths=("Letting go", "Transformation", "Deep healing", "Closure mastery"),
        challenges=("Holding onto past", "Fear of endings", "Depression tendencies", "Isolation"),
        life_purpose="To master the art of release and teach others about sacred endings",
        spiritual_path="Embrace death and rebirth cycles as natural and necessary",
        karmic_lesson="Understanding that endings create space for new beginnings",
        soul_mission="To guide souls through transitions and transformations",
        emotional_nature="Deep, introspective, and transformative",
        intuitive_gifts=("Shadow work", "Death doula energy", "Transformation alchemy", "Release rituals"),
        relationship_style="Intense, transformative connections; helps partners evolve",
        career_guidance="Therapist, hospice worker, transformation coach, shaman, grief counselor",
        lucky_elements=LuckyElements(
            colors=("Black", "Deep Purple", "Burgundy"),
            numbers=(7, 16, 25),
            gemstones=("Black Obsidian", "Smoky Quartz", "Black Tourmaline"),
            days=("Saturday", "Dark Moon days"),
        ),
        manifestation_power=ManifestationPower(wealth=70, love=75, career=78, health=82, spiritual=95),
    ),
    "Waning Crescent": Archetype(
        personality_type="The Mystic Sage",
        traits=("Wise", "Spiritual", "Intuitive", "Contemplative", "Peaceful"),
        strengths=("Spiritual wisdom", "Inner peace", "Surrender mastery", "Psychic abilities"),
        challenges=("Worldly detachment", "Loneliness", "Difficulty with materialism", "Escapism"),
        life_purpose="To embody spiritual wisdom and prepare the world for new cycles",
        spiritual_path="Master the art of surrender and trust in divine timing",
        karmic_lesson="Balancing spiritual devotion with earthly responsibilities",
        soul_mission="To be a spiritual guide bridging worlds and dimensions",
        emotional_nature="Serene, mystical, and deeply connected to source",
        intuitive_gifts=("Prophecy", "Astral travel", "Spirit communication", "Divine downloads"),
        relationship_style="Seeks soul-level connections; values spiritual partnership",
        career_guidance="Spiritual teacher, mystic, oracle, meditation guide, energy worker",
        lucky_elements=LuckyElements(
            colors=("White", "Violet", "Translucent"),
            numbers=(8, 17, 26),
            gemstones=("Selenite", "Clear Quartz", "Angelite"),
            days=("Monday", "Sunrise/Sunset hours"),
        ),
        manifestation_power=ManifestationPower(wealth=68, love=80, career=72, health=75, spiritual=98),
    ),
})


def archetype_for(phase_name: str) -> Archetype:
    """Unknown phase names get the New Moon archetype."""
    return ARCHETYPES.get(phase_name, ARCHETYPES["New Moon"])
