"""Components that give actors rendering, physics, sound, camera and behaviour."""