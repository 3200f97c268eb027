"""The platformer game, its enemy component and its command entry point."""