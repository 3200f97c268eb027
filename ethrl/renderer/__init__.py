"""Drawing of textures, fonts, text and line models."""