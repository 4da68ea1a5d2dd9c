"""Fixed reply blocks that do not depend on the knowledge base."""

LOADING = "I'm still loading farming data. Please try again in a moment."

LOAD_FAILED = "Failed to load farming data. Please refresh the page."

MIC_DENIED = ("Microphone access denied. Please allow microphone permissions "
              "to use voice recording.")

GREETING = (
    "Hello! I'm FarmMate AI, your farming assistant. I can help you with information about crops, "
    "diseases, prevention methods, and best farming practices for Ghanaian conditions. "
    "What specific crop would you like to know about?"
)

THANKS = (
    "You're welcome! I'm always here to help with your farming questions. Remember, good farming "
    "practices lead to better yields. Is there anything else you'd like to know?"
)

WEATHER = (
    "<p>For weather-specific advice in Ghana:</p>"
    "<p>Major rainy season: April-July</p>"
    "<p>Minor rainy season: September-October</p>"
    "<p>Dry season: November-March</p>"
    "<p>Plan your planting accordingly and consider using drought-tolerant varieties during dry spells. "
    "Always check with your local Meteorological Agency for current weather forecasts.</p>"
)

SOIL_HEADER = "<p>Soil management tips for Ghanaian farmers:</p>"

MARKET = (
    "<p>For market information in Ghana:</p>"
    "<p>Check with local Agric Extension Officers</p>"
    "<p>Visit regional markets for current prices</p>"
    "<p>Consider farmer cooperatives for better bargaining</p>"
    "<p>Explore the Planting for Food and Jobs market</p>"
    "<p>Look into export opportunities for certified products</p>"
    "<p>Monitor prices through the Ministry of Food and Agriculture website</p>"
)

FERTILIZER_GENERAL = (
    "<p>General fertilizer advice for Ghanaian farmers:</p>"
    "<p>Always conduct soil testing before applying fertilizers</p>"
    "<p>Use NPK 15-15-15 as a general-purpose fertilizer</p>"
    "<p>Consider organic manure to improve soil structure</p>"
    "<p>Follow recommended application rates for each crop</p>"
    "<p>Split applications often work better than single doses</p>"
    "<p>Consult with local extension officers for specific recommendations</p>"
)

PLANTING_SEASON = (
    "<p>Planting seasons in Ghana vary by crop and region:</p>"
    "<p>Major season: April-July (most crops)</p>"
    "<p>Minor season: September-October (some crops)</p>"
    "<p>The optimal timing depends on:</p>"
    "<p>Crop type</p><p>Variety</p><p>Rainfall patterns</p><p>Soil conditions</p>"
    "<p>For specific crop timing, ask me about maize, rice, yam, cassava, or cocoa planting seasons.</p>"
)

# appended verbatim to every crop's fertilizer reply
FERTILIZER_TIPS = (
    "Always conduct soil testing for precise recommendations",
    "Split applications often work better than single applications",
    "Combine with organic manure for better soil health",
    "Consider using Ghana's Planting for Food and Jobs program inputs",
)

GROWING_PRACTICES = (
    "Use certified seeds/planting materials",
    "Follow proper spacing recommendations",
    "Implement crop rotation where possible",
    "Monitor regularly for pests and diseases",
)

# ---------- fallback ----------
GROWING_TECHNIQUES_PROMPT = (
    "I can help you with growing techniques! Please specify which crop: maize, rice, yam, cassava, "
    "or cocoa? Each has different requirements for successful cultivation in Ghana."
)

PLANTING_TIMING_PROMPT = (
    "Planting seasons vary by crop and region in Ghana. For accurate timing, please let me know "
    "which crop you're asking about: maize, rice, yam, cassava, or cocoa?"
)

WATER_MANAGEMENT_PROMPT = (
    "Water management is crucial for farming success. Different crops have different water needs. "
    "Could you specify which crop you're asking about?"
)

FALLBACK_RESPONSES = (
    "I understand you're asking about farming. While I specialize in maize, rice, yam, cassava, and "
    "cocoa, I'd be happy to help with general farming advice for Ghana. Could you specify which crop "
    "you're interested in?",

    "That's an interesting question! I'm designed to help Ghanaian farmers with specific crop advice. "
    "You can ask me about diseases, prevention methods, best varieties, or growing conditions for "
    "maize, rice, yam, cassava, and cocoa.",

    "I want to make sure I give you the most accurate information. Could you tell me which crop "
    "you're referring to? I have detailed knowledge about maize, rice, yam, cassava, and cocoa "
    "farming in Ghana.",

    "Thank you for your question! To provide the best assistance, I focus on these key crops: maize, "
    "rice, yam, cassava, and cocoa. Which one would you like to learn more about today?",

    "I'm here to support Ghanaian farmers with practical advice. Let me know if you have questions "
    "about crop diseases, prevention techniques, fertilizer recommendations, or best farming "
    "practices for any of these crops: maize, rice, yam, cassava, or cocoa.",
)

# stand-in utterances when audio capture returns no transcript
SAMPLE_QUESTIONS = (
    "Tell me about maize diseases",
    "How to prevent rice blast",
    "Best varieties for cassava",
    "Cocoa fertilizer recommendations",
    "What are common yam diseases",
)
