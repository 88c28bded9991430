# 📄 File: app/modules/plant_care/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# The connections to our AI gardening expert and to the public plant encyclopedia.
# 🧪 Purpose (Technical Summary):
# Groq chat-completions implementation of PlantCareAdvisor and the Perenual implementation of PlantCatalog.
# 🔗 Dependencies:
# aiohttp, tenacity (via APIClient)
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, app.main
