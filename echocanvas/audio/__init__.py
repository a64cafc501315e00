"""Audio - OSC bridge to the SuperCollider tone server and the tone emitter."""
