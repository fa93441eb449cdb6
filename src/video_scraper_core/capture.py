import asyncio
import base64

from .logger import logger

CHUNK_BINDING = "__videoScraperCoreChunk"
DONE_BINDING = "__videoScraperCoreDone"

START_RECORDER_SCRIPT = """
({ selector, audio, video, mimeType, audioBitsPerSecond, videoBitsPerSecond, frameSize }) => {
    const element = document.querySelector(selector);
    if (!element) {
        throw new Error(`No media element matches ${selector}`);
    }
    const source = element.captureStream ? element.captureStream() : element.mozCaptureStream();
    const tracks = [];
    if (video) tracks.push(...source.getVideoTracks());
    if (audio) tracks.push(...source.getAudioTracks());
    if (!tracks.length) {
        throw new Error(`Media element ${selector} has no track to record`);
    }

    const recorder = new MediaRecorder(new MediaStream(tracks), {
        mimeType,
        audioBitsPerSecond,
        videoBitsPerSecond,
    });
    const toBase64 = (blob) => new Promise((resolve, reject) => {
        const reader = new FileReader();
        reader.onloadend = () => resolve(String(reader.result).split(',')[1] || '');
        reader.onerror = () => reject(reader.error);
        reader.readAsDataURL(blob);
    });

    // chunks must reach the sink in recording order
    let queue = Promise.resolve();
    recorder.ondataavailable = (event) => {
        if (event.data && event.data.size > 0) {
            queue = queue
                .then(() => toBase64(event.data))
                .then((data) => window.__videoScraperCoreChunk(data));
        }
    };
    recorder.onstop = () => {
        queue = queue.then(() => window.__videoScraperCoreDone());
    };
    window.__videoScraperCoreRecorder = recorder;
    recorder.start(frameSize);
    return recorder.mimeType;
}
"""

STOP_RECORDER_SCRIPT = """
() => {
    const recorder = window.__videoScraperCoreRecorder;
    if (!recorder || recorder.state === 'inactive') {
        return false;
    }
    recorder.stop();
    return true;
}
"""


class PageCaptureStream:
    """
    Live recording of a page's media element.

    A MediaRecorder runs inside the page; its chunks are handed back through
    exposed functions and written to whatever sink was given to ``pipe``.
    """

    def __init__(self, page, capture_options):
        self.page = page
        self.options = dict(capture_options)
        self.bytes_written = 0
        self.mime_type = None
        self._sink = None
        self._pending = []
        self._done = asyncio.Event()
        self._started = False
        self._destroyed = False

    async def start(self):
        await self.page.expose_function(CHUNK_BINDING, self._on_chunk)
        await self.page.expose_function(DONE_BINDING, self._on_done)
        self.mime_type = await self.page.evaluate(START_RECORDER_SCRIPT, {
            "selector": self.options.get("capture_selector", "video"),
            "audio": self.options.get("audio", True),
            "video": self.options.get("video", True),
            "mimeType": self.options.get("mime_type"),
            "audioBitsPerSecond": self.options.get("audio_bits_per_second"),
            "videoBitsPerSecond": self.options.get("video_bits_per_second"),
            "frameSize": self.options.get("frame_size"),
        })
        self._started = True
        return self

    def pipe(self, sink):
        self._sink = sink
        for chunk in self._pending:
            self._write(chunk)
        self._pending = []
        return sink

    async def destroy(self):
        """
        Stop the recorder and wait until its last chunk reached the sink.

        A recorder that already went inactive on its own (ended tracks, error)
        may still be flushing queued chunks, so the done signal is awaited
        whenever the recording was started.
        """
        try:
            await self.page.evaluate(STOP_RECORDER_SCRIPT)
            if self._started and not self._done.is_set():
                timeout = self.options.get("flush_timeout", 10000) / 1000
                await asyncio.wait_for(self._done.wait(), timeout)
        finally:
            self._destroyed = True
        if self._sink is not None:
            self._sink.flush()
        logger.debug(f"Capture stream closed after {self.bytes_written} bytes")

    def _on_chunk(self, data):
        if self._destroyed:
            logger.warning("⚠️ Dropping a capture chunk that arrived after the stream was closed")
            return
        chunk = base64.b64decode(data)
        if self._sink is None:
            self._pending.append(chunk)
        else:
            self._write(chunk)

    def _on_done(self):
        self._done.set()

    def _write(self, chunk):
        self._sink.write(chunk)
        self.bytes_written += len(chunk)
